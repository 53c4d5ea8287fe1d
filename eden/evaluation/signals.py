class FormMismatch(Exception):
    """A special-form handler was given a list whose shape it does not accept.

    Raised by handlers before they evaluate anything and turned into
    EdenUnrecognizedForm by the evaluator; it never reaches callers of evaluate.
    """
