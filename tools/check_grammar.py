#!/usr/bin/env python3

"""
Main entry point: Check whether a context free grammar is unambiguous.
"""
import argparse
import sys
from pathlib import Path

import better_exchook

import _setup_cfg_checker_env  # noqa
from cfg_checker.checker import prune_grammar, check_pruned_grammar, Verdict
from cfg_checker.errors import CheckerError, AmbiguityError
from cfg_checker.loader import load_grammar
from cfg_checker.productivity import get_recursive_symbols, get_unreachable_symbols
from cfg_checker.report import format_ambiguity, UNAMBIGUOUS_MESSAGE


class _ArgumentParser(argparse.ArgumentParser):
  def error(self, message):
    self.print_usage(sys.stdout)
    print('%s: error: %s' % (self.prog, message))
    sys.exit(1)


def _print_warnings(grammar, bounded):
  """
  :param cfg_checker.grammar.Grammar grammar: without unproductive nonterminals
  :param bool bounded: whether the search is bounded
  """
  unreachable = sorted(symbol for symbol in get_unreachable_symbols(grammar) if not grammar.is_terminal(symbol))
  if len(unreachable) > 0:
    print('Warning: nonterminals not reachable from the start symbol: %s' % grammar.format_symbols(unreachable))
  recursive = sorted(get_recursive_symbols(grammar) - set(unreachable))
  if len(recursive) > 0 and not bounded:
    print(
      'Warning: recursive nonterminals %s, the search may not terminate. Consider --max-depth or --max-forms.' % (
        grammar.format_symbols(recursive)))


def main(argv=None):
  """
  Main entry point.

  :param list[str]|None argv: arguments, by default `sys.argv[1:]`
  :returns: exit status
  :rtype: int
  """
  better_exchook.install()
  parser = _ArgumentParser(prog='cfg-checker', description='Check whether a context free grammar is unambiguous.')
  parser.add_argument('grammar', help='Path to grammar file, one rule `A = B c | d` per line')
  parser.add_argument(
    '--max-depth', dest='max_depth', type=int, default=None,
    help='Do not expand derivations deeper than this. The result is inconclusive if this cuts off the search.')
  parser.add_argument(
    '--max-forms', dest='max_forms', type=int, default=None,
    help='Give up after visiting this many distinct sentential forms.')
  parser.add_argument(
    '--stats', dest='stats', action='store_true', help='Print search statistics.')
  parser.add_argument(
    '--verbose', dest='verbose', action='store_true', help='Print full stacktrace for all errors.')

  args = parser.parse_args(argv)
  if args.max_depth is not None and args.max_depth < 0:
    parser.error('--max-depth must not be negative')
  if args.max_forms is not None and args.max_forms < 1:
    parser.error('--max-forms must be positive')

  grammar_path = Path(args.grammar)

  def on_new_depth(depth):
    print('.', end='', flush=True)

  try:
    grammar = prune_grammar(load_grammar(grammar_path))
    _print_warnings(grammar, bounded=args.max_depth is not None or args.max_forms is not None)
    result = check_pruned_grammar(
      grammar, max_depth=args.max_depth, max_forms=args.max_forms, on_new_depth=on_new_depth)
  except OSError:
    print("Unable to open file '%s'." % args.grammar)
    return 1
  except UnicodeDecodeError as exc:
    print("Unable to read file '%s': %s." % (args.grammar, exc.reason))
    return 1
  except AmbiguityError as ae:
    if args.verbose:
      raise ae
    print('\n' + format_ambiguity(ae))
    return 1
  except CheckerError as ce:
    if args.verbose:
      raise ce
    print(str(ce))
    return 1

  print()
  if args.stats:
    print('Visited %i distinct sentential forms up to depth %i.' % (
      result.search_result.num_forms, result.search_result.max_depth))
  if result.verdict == Verdict.INCONCLUSIVE:
    print('No ambiguity found up to depth %i, but the search was cut off.' % args.max_depth)
    return 1
  print(UNAMBIGUOUS_MESSAGE)
  return 0


if __name__ == '__main__':
  sys.exit(main())
