from __future__ import annotations

from typing import Optional, Tuple, List, Iterator

from cfg_checker.grammar import Grammar


class SententialForm:
  """
  A sequence of symbols derived from the start symbol, together with the rewrite step that produced it.
  Never mutated, so ancestors can be shared between many forms.
  """

  def __init__(self, symbols: Tuple[int], parent: Optional[SententialForm] = None,
               rewritten_pos: Optional[int] = None, alternative: Optional[int] = None):
    """
    :param symbols: also the dedup key of this form
    :param parent: form this one was produced from, None for the root
    :param rewritten_pos: position in `parent.symbols` of the symbol that was expanded
    :param alternative: index of the alternative substituted for that symbol
    """
    assert (parent is None) == (rewritten_pos is None) == (alternative is None)
    self.symbols = tuple(symbols)
    self.parent = parent
    self.rewritten_pos = rewritten_pos
    self.alternative = alternative
    self.depth: int = 0 if parent is None else parent.depth + 1

  @classmethod
  def make_root(cls, grammar: Grammar) -> SententialForm:
    return cls((grammar.start,))

  @property
  def is_root(self) -> bool:
    return self.parent is None

  def make_child(self, grammar: Grammar, pos: int, alternative: int) -> SententialForm:
    """
    Splices `alternative` of the symbol at `pos` into this form.
    """
    assert 0 <= pos < len(self.symbols)
    right = grammar.get_alternative(self.symbols[pos], alternative)
    return SententialForm(
      self.symbols[:pos] + right + self.symbols[pos + 1:], parent=self, rewritten_pos=pos, alternative=alternative)

  def iter_children(self, grammar: Grammar) -> Iterator[SententialForm]:
    """
    All forms reachable by a single rewrite, ordered by position, then by alternative.
    """
    for pos, symbol in enumerate(self.symbols):
      for alternative in range(len(grammar.get_alternatives(symbol))):
        yield self.make_child(grammar, pos, alternative)

  def get_rewritten_symbol(self) -> int:
    assert not self.is_root
    return self.parent.symbols[self.rewritten_pos]

  def __repr__(self):
    return 'SententialForm[%s, depth=%i]' % (' '.join(str(symbol) for symbol in self.symbols), self.depth)


def get_derivation_chain(form: SententialForm) -> List[SententialForm]:
  """
  :returns: `form` and all its ancestors, the root last
  """
  chain = [form]
  while not chain[-1].is_root:
    chain.append(chain[-1].parent)
  return chain
