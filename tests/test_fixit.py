from fixit.testing import add_lint_rule_tests_to_module

from peekbuffer.fixit import TakeWhileLosesElementRule

add_lint_rule_tests_to_module(globals(), [TakeWhileLosesElementRule()])
