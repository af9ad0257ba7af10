"""
For context-free grammars the order in which rules are applied does not matter.
Two derivations of the same sentential form are equivalent iff they describe the same parse tree,
e.g. these two are equivalent:

  0: E             0: E
  1: E + E         1: E + E
  2: E + n         2: n + E
  3: n + n         3: n + n

If two derivations are equivalent, that does not count as an ambiguity.
"""
from typing import List, Tuple

from cfg_checker.derivation import SententialForm, get_derivation_chain
from cfg_checker.grammar import Grammar


def _synchronize(grammar: Grammar, chain: List[SententialForm], frame: int, pos: int) -> Tuple[int, int]:
  """
  Walks from `chain[frame]` towards `chain[0]` until the next step rewrites the symbol at `pos`,
  keeping track of where that symbol moves to.

  :param chain: derivation chain, root last
  :param frame: index into `chain`
  :param pos: symbol position of interest in `chain[frame]`
  :returns: new frame and symbol position. frame is 0 if the symbol is never rewritten
  """
  while frame > 0:
    child = chain[frame - 1]
    if child.rewritten_pos == pos:
      break
    if pos > child.rewritten_pos:
      pos += len(grammar.get_alternative(child.get_rewritten_symbol(), child.alternative)) - 1
    frame -= 1
  return frame, pos


def are_equivalent(grammar: Grammar, form_a: SententialForm, form_b: SententialForm) -> bool:
  """
  Whether the derivations of `form_a` and `form_b` encode the same parse tree.
  Walks both parse trees from the root downwards and compares each node's symbol and chosen alternative.

  :param Grammar grammar: grammar both forms were derived in
  :param SententialForm form_a:
  :param SententialForm form_b: must have the same symbols as `form_a`
  """
  assert form_a.symbols == form_b.symbols
  chain_a, chain_b = get_derivation_chain(form_a), get_derivation_chain(form_b)

  # each entry is (frame_a, frame_b, pos_a, pos_b): a pair of parse tree nodes still to compare
  todo = [(len(chain_a) - 1, len(chain_b) - 1, 0, 0)]
  while len(todo) >= 1:
    frame_a, frame_b, pos_a, pos_b = todo.pop()
    frame_a, pos_a = _synchronize(grammar, chain_a, frame_a, pos_a)
    frame_b, pos_b = _synchronize(grammar, chain_b, frame_b, pos_b)

    # Both sides better arrive at the bottom at the same time.
    if frame_a == 0 or frame_b == 0:
      if frame_a != frame_b:
        return False
      continue

    # Both rewrite this node now, so they must agree on the symbol and the alternative.
    symbol_a, symbol_b = chain_a[frame_a].symbols[pos_a], chain_b[frame_b].symbols[pos_b]
    alternative_a, alternative_b = chain_a[frame_a - 1].alternative, chain_b[frame_b - 1].alternative
    if symbol_a != symbol_b or alternative_a != alternative_b:
      return False

    for offset in range(len(grammar.get_alternative(symbol_a, alternative_a))):
      todo.append((frame_a - 1, frame_b - 1, pos_a + offset, pos_b + offset))
  return True
