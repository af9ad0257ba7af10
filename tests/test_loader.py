import _setup_test_env  # noqa
import sys
import unittest
from pathlib import Path

import better_exchook
import pytest

from cfg_checker.errors import GrammarSyntaxError, DuplicateRuleError
from cfg_checker.grammar import Grammar
from cfg_checker.loader import parse_grammar, load_grammar, tokenize_line

GRAMMARS_PATH = Path(__file__).parent.joinpath('grammars')


def test_tokenize_line():
  assert tokenize_line('S = a  b') == (['S', '=', 'a', 'b'], [1, 3, 5, 8])
  assert tokenize_line(' \t ') == ([], [])
  assert tokenize_line('\tA=b\r') == (['A=b'], [2])


def test_tokenize_line_other_white_space():
  # form feed and no-break space belong to the symbol name
  assert tokenize_line('a\x0cb c') == (['a\x0cb', 'c'], [1, 5])
  assert tokenize_line('a\xa0b') == (['a\xa0b'], [1])


def test_parse_grammar():
  g = parse_grammar('S = A b\nA = a | \n')
  assert g.symbol_names == ('S', 'A', 'b', 'a')
  assert g.start == 0
  assert g.get_alternatives(g.get_symbol('S')) == ((1, 2),)
  assert g.get_alternatives(g.get_symbol('A')) == ((3,), ())
  assert set(g.terminals) == {g.get_symbol('a'), g.get_symbol('b')}
  assert set(g.non_terminals) == {g.get_symbol('S'), g.get_symbol('A')}


def test_parse_grammar_start_is_first_left_side():
  g = parse_grammar('\n\nexpr = term + expr | term\n   \nterm = num\n')
  assert g.get_name(g.start) == 'expr'
  assert g.format_symbols(g.get_alternative(g.start, 0)) == 'term + expr'
  assert g.is_terminal(g.get_symbol('num'))
  assert g.is_terminal(g.get_symbol('+'))


def test_parse_grammar_epsilon():
  g = parse_grammar('S = A\nA = B\nB =')
  assert g.get_alternatives(g.get_symbol('B')) == ((),)
  assert not g.is_terminal(g.get_symbol('B'))


def test_parse_grammar_empty():
  g = parse_grammar('\n  \n')
  assert g.num_symbols == 0
  assert g == Grammar([], [])


def test_parse_grammar_single_token():
  with pytest.raises(GrammarSyntaxError) as exc_info:
    parse_grammar('X')
  assert exc_info.value.line_num == 1
  print(exc_info.value)
  assert 'Syntax error on line 1:1' in str(exc_info.value)


def test_parse_grammar_missing_equals():
  with pytest.raises(GrammarSyntaxError) as exc_info:
    parse_grammar('S = a\n\nS a b\n')
  error = exc_info.value
  print(error)
  assert error.line_num == 3
  assert error.col == 3
  assert str(error) == "Syntax error on line 3:3\n\n003: S a b\n       ^\n\nBad production rule: expected '=', got 'a'."


def test_parse_grammar_reserved_tokens():
  with pytest.raises(GrammarSyntaxError) as exc_info:
    parse_grammar('| = a')
  assert exc_info.value.line_num == 1
  with pytest.raises(GrammarSyntaxError) as exc_info:
    parse_grammar('S = a\nA = b = c')
  assert exc_info.value.line_num == 2


def test_parse_grammar_duplicate_rule():
  with pytest.raises(DuplicateRuleError) as exc_info:
    parse_grammar('S = a B\nB = b\nS = c\n')
  error = exc_info.value
  print(error)
  assert error.line_num == 3
  assert error.col == 1
  assert error.nonterminal == 'S'
  assert "Multiple rules for nonterminal 'S'." in str(error)
  with pytest.raises(DuplicateRuleError):
    parse_grammar('S = B\nB =\nB = x')


def test_parse_grammar_terminal_defined_later():
  g = parse_grammar('S = A c\nA = a')
  assert not g.is_terminal(g.get_symbol('A'))


def test_load_grammar():
  g = load_grammar(GRAMMARS_PATH.joinpath('statement.cfg'))
  assert g.get_name(g.start) == 'statement'
  assert len(g.get_alternatives(g.get_symbol('condition'))) == 2
  with pytest.raises(OSError):
    load_grammar(GRAMMARS_PATH.joinpath('does_not_exist.cfg'))


def test_parse_grammar_line_endings():
  g = parse_grammar('S = A b\r\nA = a\r\n')
  assert g.symbol_names == ('S', 'A', 'b', 'a')
  # only \n ends a line
  g = parse_grammar('S = a\x0cb\x1cc\u2028d')
  assert g.symbol_names == ('S', 'a\x0cb\x1cc\u2028d')
  g = parse_grammar('S = a\rA b')
  assert g.symbol_names == ('S', 'a', 'A', 'b')
  assert g.is_terminal(g.get_symbol('A'))


def test_load_grammar_keeps_carriage_returns():
  g = load_grammar(GRAMMARS_PATH.joinpath('crlf.cfg'))
  assert g.symbol_names == ('S', 'A', 'b', 'a')
  assert g.get_alternatives(g.get_symbol('A')) == ((3,), ())


def test_load_grammar_invalid_utf8():
  with pytest.raises(UnicodeDecodeError):
    load_grammar(GRAMMARS_PATH.joinpath('invalid_utf8.cfg'))


if __name__ == "__main__":
  try:
    better_exchook.install()
    if len(sys.argv) <= 1:
      for k, v in sorted(globals().items()):
        if k.startswith("test_"):
          print("-" * 40)
          print("Executing: %s" % k)
          try:
            v()
          except unittest.SkipTest as exc:
            print("SkipTest:", exc)
          print("-" * 40)
      print("Finished all tests.")
    else:
      assert len(sys.argv) >= 2
      for arg in sys.argv[1:]:
        print("Executing: %s" % arg)
        if arg in globals():
          globals()[arg]()  # assume function and execute
        else:
          eval(arg)  # assume Python code and execute
  finally:
    pass
