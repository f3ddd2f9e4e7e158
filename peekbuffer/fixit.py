"""
Fixit rule flagging itertools.takewhile() over an iterator that is used again.
"""


import libcst as cst
from fixit import Invalid, LintRule, Valid
from libcst.helpers import get_full_name_for_node
from libcst.metadata import PositionProvider, ScopeProvider

TAKEWHILE_NAMES = {"takewhile", "itertools.takewhile"}


class TakeWhileLosesElementRule(LintRule):
    """
    itertools.takewhile() pulls the first non-matching element out of its
    iterator and throws it away. If that iterator is read again afterwards,
    the element is silently lost; peekable(it).take_while(pred) keeps it.
    """

    METADATA_DEPENDENCIES = (PositionProvider, ScopeProvider)

    MESSAGE = (
        "itertools.takewhile() discards the first element that fails the"
        " predicate; use peekbuffer.peekable(...).take_while(...) if the"
        " iterator is read again"
    )

    VALID = [
        Valid(
            """
import itertools

def leading_blanks(lines):
    return list(itertools.takewhile(str.isspace, lines))
"""
        ),
        Valid(
            """
from itertools import takewhile

def small(numbers):
    return list(takewhile(lambda n: n < 10, [1, 2, 30, 4]))
"""
        ),
        Valid(
            """
from itertools import takewhile

def first_run(it):
    print(it)
    return list(takewhile(bool, it))
"""
        ),
        Valid(
            """
from itertools import dropwhile

def skip_header(it):
    rest = dropwhile(lambda line: line.startswith("#"), it)
    return list(rest), it
"""
        ),
    ]

    INVALID = [
        Invalid(
            """
import itertools

def split_header(it):
    header = list(itertools.takewhile(lambda line: line.startswith("#"), it))
    return header, list(it)
"""
        ),
        Invalid(
            """
from itertools import takewhile

def split_digits(chars):
    digits = "".join(takewhile(str.isdigit, chars))
    rest = "".join(chars)
    return digits, rest
"""
        ),
    ]

    def visit_Call(self, node: cst.Call) -> None:
        if get_full_name_for_node(node.func) not in TAKEWHILE_NAMES:
            return
        if len(node.args) != 2:
            return
        iterable = node.args[1].value
        if not isinstance(iterable, cst.Name):
            return
        scope = self.get_metadata(ScopeProvider, iterable, None)
        if scope is None:
            return
        call_end = self.get_metadata(PositionProvider, node).end
        later_reads = set()
        for assignment in scope[iterable.value]:
            accesses = assignment.references
            if not any(access.node is iterable for access in accesses):
                continue
            for access in accesses:
                start = self.get_metadata(PositionProvider, access.node).start
                if (start.line, start.column) >= (call_end.line, call_end.column):
                    later_reads.add(id(access.node))
        if later_reads:
            self.report(node)
