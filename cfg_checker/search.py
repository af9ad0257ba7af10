from collections import deque
from typing import Optional, Dict, Tuple, Callable, Deque

from cfg_checker.derivation import SententialForm
from cfg_checker.equivalence import are_equivalent
from cfg_checker.errors import AmbiguityError, SearchLimitError
from cfg_checker.grammar import Grammar


class SearchResult:
  """
  Outcome of a search that found no ambiguity.
  """

  def __init__(self, num_forms: int, max_depth: int, complete: bool):
    """
    :param num_forms: number of distinct sentential forms visited
    :param max_depth: deepest derivation depth visited
    :param complete: False iff a depth bound cut off some expansions
    """
    self.num_forms = num_forms
    self.max_depth = max_depth
    self.complete = complete

  def __repr__(self):
    return 'SearchResult(num_forms=%r, max_depth=%r, complete=%r)' % (self.num_forms, self.max_depth, self.complete)


class DerivationSearch:
  """
  Breadth-first search over all distinct sentential forms derivable from the start symbol.
  Whenever two derivations reach the same sentential form, they must describe the same parse tree,
  otherwise the grammar is ambiguous.

  Only terminates if there are finitely many distinct sentential forms, unless bounded.
  """

  def __init__(self, grammar: Grammar, max_depth: Optional[int] = None, max_forms: Optional[int] = None,
               on_new_depth: Optional[Callable[[int], None]] = None):
    """
    :param grammar: without unproductive nonterminals
    :param max_depth: do not expand sentential forms at this depth
    :param max_forms: raise a `SearchLimitError` when visiting more distinct sentential forms
    :param on_new_depth: called once per search depth level, e.g. to show progress
    """
    assert max_depth is None or max_depth >= 0
    assert max_forms is None or max_forms >= 1
    self.grammar = grammar
    self.max_depth = max_depth
    self.max_forms = max_forms
    self.on_new_depth = on_new_depth
    self.visited: Dict[Tuple[int], SententialForm] = {}
    self._frontier: Deque[SententialForm] = deque()
    self._search_depth = 0
    self._deepest_visited = 0
    self._complete = True

  def _visit(self, form: SententialForm):
    """
    Registers `form`, or checks it against the form registered first with the same symbols.

    :raises AmbiguityError: if the two derivations differ
    """
    other_form = self.visited.get(form.symbols)
    if other_form is None:
      self.visited[form.symbols] = form
      self._frontier.append(form)
      self._deepest_visited = max(self._deepest_visited, form.depth)
      if self.max_forms is not None and len(self.visited) > self.max_forms:
        raise SearchLimitError(num_forms=len(self.visited), depth=form.depth)
      return
    if not are_equivalent(self.grammar, form, other_form):
      raise AmbiguityError(self.grammar, form, other_form)

  def run(self) -> SearchResult:
    """
    :raises AmbiguityError: on the first sentential form with two different derivations
    :raises SearchLimitError: if `max_forms` is exceeded
    """
    assert len(self.visited) == 0, 'can only run once'
    self._visit(SententialForm.make_root(self.grammar))
    while len(self._frontier) >= 1:
      form = self._frontier.popleft()
      if len(form.symbols) == 0:
        continue
      if self.max_depth is not None and form.depth >= self.max_depth:
        if not all(self.grammar.is_terminal(symbol) for symbol in form.symbols):
          self._complete = False
        continue
      if form.depth + 1 > self._search_depth:
        self._search_depth = form.depth + 1
        if self.on_new_depth is not None:
          self.on_new_depth(self._search_depth)
      for child in form.iter_children(self.grammar):
        self._visit(child)
    return SearchResult(num_forms=len(self.visited), max_depth=self._deepest_visited, complete=self._complete)
