"""
Symbols are dense integer ids, symbol 0 is the start symbol.
A symbol is a terminal iff it has no alternatives.
"""
from typing import Tuple, Dict, Iterable, Set

START_SYMBOL = 0


class Grammar:
  """
  A context free grammar, as a symbol table and a rule table.
  """

  def __init__(self, symbol_names, rules):
    """
    :param tuple[str]|list[str] symbol_names: name of each symbol, only used for reporting
    :param tuple[tuple[tuple[int]]]|list[list[list[int]]] rules: for each symbol its ordered alternatives
    """
    self.symbol_names: Tuple[str] = tuple(symbol_names)
    self.rules: Tuple[Tuple[Tuple[int]]] = tuple(
      tuple(tuple(alternative) for alternative in alternatives) for alternatives in rules)
    assert len(self.symbol_names) == len(self.rules)
    assert all(
      0 <= symbol < len(self.rules)
      for alternatives in self.rules for alternative in alternatives for symbol in alternative)
    self._symbols_by_name: Dict[str, int] = {name: symbol for symbol, name in enumerate(self.symbol_names)}
    assert len(self._symbols_by_name) == len(self.symbol_names), 'symbol names must be unique'

  @property
  def start(self) -> int:
    return START_SYMBOL

  @property
  def num_symbols(self) -> int:
    return len(self.rules)

  @property
  def terminals(self) -> Tuple[int]:
    return tuple(symbol for symbol in range(self.num_symbols) if self.is_terminal(symbol))

  @property
  def non_terminals(self) -> Tuple[int]:
    return tuple(symbol for symbol in range(self.num_symbols) if not self.is_terminal(symbol))

  def is_terminal(self, symbol: int) -> bool:
    return len(self.rules[symbol]) == 0

  def get_alternatives(self, symbol: int) -> Tuple[Tuple[int]]:
    return self.rules[symbol]

  def get_alternative(self, symbol: int, alternative: int) -> Tuple[int]:
    return self.rules[symbol][alternative]

  def get_name(self, symbol: int) -> str:
    return self.symbol_names[symbol]

  def get_symbol(self, name: str) -> int:
    return self._symbols_by_name[name]

  def format_symbols(self, symbols: Iterable[int]) -> str:
    return ' '.join(self.get_name(symbol) for symbol in symbols)

  def without_symbols(self, removed_symbols: Set[int]) -> 'Grammar':
    """
    Makes a compacted copy without `removed_symbols` and without every alternative referencing one of them.
    Surviving symbols keep their relative order, so the start symbol stays 0 as long as it is not removed.

    :param set[int] removed_symbols:
    :rtype: Grammar
    """
    assert self.start not in removed_symbols
    new_ids: Dict[int, int] = {}
    for symbol in range(self.num_symbols):
      if symbol not in removed_symbols:
        new_ids[symbol] = len(new_ids)
    symbol_names = [self.symbol_names[symbol] for symbol in new_ids]
    rules = [
      [
        [new_ids[right] for right in alternative]
        for alternative in self.rules[symbol] if all(right in new_ids for right in alternative)]
      for symbol in new_ids]
    return Grammar(symbol_names, rules)

  def __repr__(self):
    return 'Grammar[%s]' % '; '.join(
      '%s = %s' % (self.get_name(symbol), ' | '.join(
        self.format_symbols(alternative) for alternative in self.get_alternatives(symbol)))
      for symbol in self.non_terminals)

  def __eq__(self, other):
    if not isinstance(other, Grammar):
      return False
    return self.symbol_names == other.symbol_names and self.rules == other.rules

  def __hash__(self):
    return hash((self.symbol_names, self.rules))
