"""Exception hierarchy for the legal parser."""


class LegalParserError(Exception):
    """Base parser error."""
    pass


class StructuredOutputError(LegalParserError):
    """LLM output was not valid JSON or did not match the expected schema."""
    pass


class HeadExtractionError(LegalParserError):
    """The head-field collaborator could not produce the document head.

    This is the only failure that aborts a parse.
    """
    pass
