from pathlib import Path
from typing import List, Dict, Tuple

from cfg_checker.errors import GrammarSyntaxError, DuplicateRuleError
from cfg_checker.grammar import Grammar

DEFINE_TOKEN = '='
ALTERNATIVE_TOKEN = '|'

"""
Only these separate tokens, other (unicode) white space is part of a symbol name.
"""
WHITESPACE_CHARS = frozenset(' \t\r\n')


def tokenize_line(line):
  """
  :param str line:
  :returns: tokens and the column each starts at, counting from 1
  :rtype: tuple[list[str], list[int]]
  """
  tokens, tokens_col = [], []
  token_start = None
  for pos, char in enumerate(line + ' '):
    if char in WHITESPACE_CHARS:
      if token_start is not None:
        tokens.append(line[token_start:pos])
        tokens_col.append(token_start + 1)
        token_start = None
    elif token_start is None:
      token_start = pos
  return tokens, tokens_col


def parse_grammar(word: str) -> Grammar:
  """
  Reads one rule `NONTERMINAL = X Y ... | Z ... | ...` per line.
  The left side of the first rule becomes the start symbol, symbols never on a left side are terminals.
  Lines are separated by `\\n` only.

  :param str word: grammar description
  :rtype: Grammar
  """
  symbol_names: List[str] = []
  symbol_ids: Dict[str, int] = {}
  rules: List[List[Tuple[int]]] = []

  def register_symbol(name: str) -> int:
    if name not in symbol_ids:
      symbol_ids[name] = len(symbol_names)
      symbol_names.append(name)
      rules.append([])
    return symbol_ids[name]

  for line_num, line in enumerate(word.split('\n'), start=1):
    tokens, tokens_col = tokenize_line(line)
    if len(tokens) == 0:
      continue
    if len(tokens) < 2:
      raise GrammarSyntaxError(
        line, line_num, tokens_col[0], len(tokens[0]),
        'Bad production rule: expected %r after the nonterminal.' % DEFINE_TOKEN)
    left = tokens[0]
    if left in {DEFINE_TOKEN, ALTERNATIVE_TOKEN}:
      raise GrammarSyntaxError(
        line, line_num, tokens_col[0], len(left),
        'Bad production rule: reserved token %r cannot be a nonterminal.' % left)
    if tokens[1] != DEFINE_TOKEN:
      raise GrammarSyntaxError(
        line, line_num, tokens_col[1], len(tokens[1]),
        'Bad production rule: expected %r, got %r.' % (DEFINE_TOKEN, tokens[1]))
    if left in symbol_ids and len(rules[symbol_ids[left]]) > 0:
      raise DuplicateRuleError(line, line_num, tokens_col[0], left)

    alternatives: List[List[str]] = [[]]
    for token, token_col in zip(tokens[2:], tokens_col[2:]):
      if token == ALTERNATIVE_TOKEN:
        alternatives.append([])
      elif token == DEFINE_TOKEN:
        raise GrammarSyntaxError(
          line, line_num, token_col, len(token),
          'Bad production rule: %r may only follow the nonterminal.' % DEFINE_TOKEN)
      else:
        alternatives[-1].append(token)

    left_symbol = register_symbol(left)
    for alternative in alternatives:
      rules[left_symbol].append(tuple(register_symbol(name) for name in alternative))

  return Grammar(symbol_names, rules)


def load_grammar(file_path: Path) -> Grammar:
  """
  :raises OSError: if the file cannot be read
  :raises UnicodeDecodeError: if the file is not UTF-8 encoded
  """
  assert isinstance(file_path, Path)
  with open(file_path, encoding='utf-8', newline='') as grammar_file:
    word = grammar_file.read()
  return parse_grammar(word)
