from cfg_checker.derivation import SententialForm, get_derivation_chain
from cfg_checker.errors import AmbiguityError
from cfg_checker.grammar import Grammar

EMPTY_LANGUAGE_MESSAGE = 'The language generated by the grammar is empty.'
UNAMBIGUOUS_MESSAGE = 'The grammar is unambiguous.'


def format_sentential_form(grammar: Grammar, form: SententialForm) -> str:
  return grammar.format_symbols(form.symbols)


def format_derivation(grammar: Grammar, form: SententialForm, indent: int = 2) -> str:
  """
  One line `depth: symbols` per rewrite step, starting at the start symbol.
  """
  return '\n'.join(
    ('%s%i: %s' % (' ' * indent, step.depth, format_sentential_form(grammar, step))).rstrip()
    for step in reversed(get_derivation_chain(form)))


def format_ambiguity(error: AmbiguityError) -> str:
  grammar = error.grammar
  return '\n'.join([
    'Found a sentential form with two different derivations:',
    '',
    '  ' + format_sentential_form(grammar, error.form),
    '',
    'Derivation 1:',
    '',
    format_derivation(grammar, error.form),
    '',
    'Derivation 2:',
    '',
    format_derivation(grammar, error.other_form)])
