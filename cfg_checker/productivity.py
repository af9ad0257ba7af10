from typing import Set, FrozenSet

import networkx as nx

from cfg_checker.grammar import Grammar


def is_productive(grammar: Grammar, symbol: int, ancestors: FrozenSet[int] = frozenset()) -> bool:
  """
  Whether `symbol` derives some finite string of terminals.

  Symbols in `ancestors` are currently being proven productive further up,
  so an alternative using one of them does not count.
  A nonterminal only reaching itself is thus unproductive through that alternative,
  but may still be productive through another one.

  :param Grammar grammar:
  :param int symbol:
  :param frozenset[int] ancestors:
  """
  if grammar.is_terminal(symbol):
    return True
  inner_ancestors = ancestors | {symbol}
  for alternative in grammar.get_alternatives(symbol):
    if all(
        grammar.is_terminal(right) or (right not in inner_ancestors and is_productive(grammar, right, inner_ancestors))
        for right in alternative):
      return True
  return False


def get_unproductive_symbols(grammar: Grammar) -> Set[int]:
  """
  :returns: all nonterminals not productive, each tested with a fresh ancestor set
  """
  return {symbol for symbol in grammar.non_terminals if not is_productive(grammar, symbol)}


def prune_unproductive(grammar: Grammar, fixpoint: bool = True) -> Grammar:
  """
  Removes unproductive nonterminals and all alternatives using them.

  :param Grammar grammar: must have a productive start symbol, which is not checked again
  :param bool fixpoint: repeat until nothing is removed anymore, otherwise make a single pass
  :rtype: Grammar
  """
  assert grammar.num_symbols > 0
  while True:
    unproductive = get_unproductive_symbols(grammar)
    if len(unproductive) == 0:
      return grammar
    grammar = grammar.without_symbols(unproductive)
    if not fixpoint:
      return grammar


def make_rule_graph(grammar: Grammar) -> nx.DiGraph:
  """
  Edge A -> X iff X occurs in some alternative of A.
  """
  graph = nx.DiGraph()
  graph.add_nodes_from(range(grammar.num_symbols))
  for symbol in grammar.non_terminals:
    for alternative in grammar.get_alternatives(symbol):
      graph.add_edges_from((symbol, right) for right in alternative)
  return graph


def get_unreachable_symbols(grammar: Grammar) -> Set[int]:
  if grammar.num_symbols == 0:
    return set()
  graph = make_rule_graph(grammar)
  reachable = nx.descendants(graph, grammar.start) | {grammar.start}
  return set(graph.nodes) - reachable


def get_recursive_symbols(grammar: Grammar) -> Set[int]:
  """
  Nonterminals which can occur in a sentential form derived from themselves.
  A grammar with such symbols may have infinitely many distinct sentential forms.
  """
  graph = make_rule_graph(grammar)
  recursive = set(nx.nodes_with_selfloops(graph))
  for component in nx.strongly_connected_components(graph):
    if len(component) > 1:
      recursive.update(component)
  return recursive
