from enum import Enum
from typing import Optional, Callable

from cfg_checker.errors import EmptyLanguageError
from cfg_checker.grammar import Grammar
from cfg_checker.productivity import is_productive, prune_unproductive
from cfg_checker.search import DerivationSearch, SearchResult


class Verdict(Enum):
  UNAMBIGUOUS = 'unambiguous'
  INCONCLUSIVE = 'inconclusive'


class CheckResult:
  def __init__(self, verdict: Verdict, grammar: Grammar, search_result: SearchResult):
    """
    :param verdict:
    :param grammar: the pruned grammar that was searched
    :param search_result:
    """
    self.verdict = verdict
    self.grammar = grammar
    self.search_result = search_result

  def __repr__(self):
    return 'CheckResult(%s, %r)' % (self.verdict.value, self.search_result)


def prune_grammar(grammar: Grammar, fixpoint: bool = True) -> Grammar:
  """
  :returns: `grammar` without unproductive nonterminals
  :raises EmptyLanguageError: if the start symbol cannot derive any string of terminals
  """
  if grammar.num_symbols == 0 or not is_productive(grammar, grammar.start):
    raise EmptyLanguageError()
  return prune_unproductive(grammar, fixpoint=fixpoint)


def check_pruned_grammar(grammar: Grammar, max_depth: Optional[int] = None, max_forms: Optional[int] = None,
                         on_new_depth: Optional[Callable[[int], None]] = None) -> CheckResult:
  """
  :param grammar: as returned by `prune_grammar`
  :raises AmbiguityError: with the first sentential form found that has two different derivations
  :raises SearchLimitError: if `max_forms` is exceeded
  """
  search = DerivationSearch(grammar, max_depth=max_depth, max_forms=max_forms, on_new_depth=on_new_depth)
  search_result = search.run()
  verdict = Verdict.UNAMBIGUOUS if search_result.complete else Verdict.INCONCLUSIVE
  return CheckResult(verdict, grammar, search_result)


def check_grammar(grammar: Grammar, max_depth: Optional[int] = None, max_forms: Optional[int] = None,
                  fixpoint: bool = True, on_new_depth: Optional[Callable[[int], None]] = None) -> CheckResult:
  """
  Checks whether every sentential form of `grammar` has exactly one parse tree.

  :raises EmptyLanguageError: if the start symbol cannot derive any string of terminals. No search is done then.
  :raises AmbiguityError: with the first sentential form found that has two different derivations
  :raises SearchLimitError: if `max_forms` is exceeded
  """
  return check_pruned_grammar(
    prune_grammar(grammar, fixpoint=fixpoint), max_depth=max_depth, max_forms=max_forms, on_new_depth=on_new_depth)
