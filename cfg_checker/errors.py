class CheckerError(Exception):
  def __init__(self, message: str):
    super(CheckerError, self).__init__(message)


def make_error_message(line: str, line_num: int, col: int, error_name: str, message: str, length: int = 1) -> str:
  """
  Shows the rule line with a `^` marker under the offending tokens.

  :param line: the grammar line, without end-of-line symbol
  :param line_num: starting counting at 1
  :param col: starting counting at 1
  :param length: number of characters to mark
  """
  assert line_num >= 1 and 1 <= col <= len(line) + 1
  line_prefix = '%03i: ' % line_num
  return '%s on line %i:%i\n\n%s%s\n%s%s\n\n%s' % (
    error_name, line_num, col, line_prefix, line, ' ' * (len(line_prefix) + col - 1), '^' * max(1, length), message)


class GrammarSyntaxError(CheckerError):
  """
  A malformed production rule line in a grammar description.
  """

  def __init__(self, line, line_num, col, length, message):
    """
    :param str line: the malformed rule line
    :param int line_num: starting counting at 1
    :param int col: where the error starts, starting counting at 1
    :param int length: number of characters to mark
    :param str message:
    """
    self.line_num = line_num
    self.col = col
    super().__init__(make_error_message(line, line_num, col, error_name='Syntax error', message=message, length=length))


class DuplicateRuleError(CheckerError):
  """
  A nonterminal with more than one rule line.
  """

  def __init__(self, line, line_num, col, nonterminal):
    """
    :param str line: the second rule line of the nonterminal
    :param int line_num: starting counting at 1
    :param int col: where the left side starts, starting counting at 1
    :param str nonterminal: name of the nonterminal
    """
    self.line_num = line_num
    self.col = col
    self.nonterminal = nonterminal
    super().__init__(make_error_message(
      line, line_num, col, error_name='Duplicate rule', message="Multiple rules for nonterminal '%s'." % nonterminal,
      length=len(nonterminal)))


class EmptyLanguageError(CheckerError):
  """
  The start symbol cannot derive any finite string of terminals.
  """

  def __init__(self):
    super().__init__('The language generated by the grammar is empty.')


class AmbiguityError(CheckerError):
  """
  Two derivations with different parse trees produced the same sentential form.
  This is a successful detection, it just answers the question negatively.
  """

  def __init__(self, grammar, form, other_form):
    """
    :param cfg_checker.grammar.Grammar grammar: the (pruned) grammar both forms were derived in
    :param cfg_checker.derivation.SententialForm form: the form that collided
    :param cfg_checker.derivation.SententialForm other_form: the form registered first with the same symbols
    """
    assert form.symbols == other_form.symbols
    self.grammar = grammar
    self.form = form
    self.other_form = other_form
    super().__init__(
      'Found a sentential form with two different derivations: %s' % grammar.format_symbols(form.symbols))


class SearchLimitError(CheckerError):
  """
  The search registered more distinct sentential forms than allowed.
  """

  def __init__(self, num_forms: int, depth: int):
    self.num_forms = num_forms
    self.depth = depth
    super().__init__(
      'Search limit reached after %i distinct sentential forms (depth %i) without finding an ambiguity.' % (
        num_forms, depth))
