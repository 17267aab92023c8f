class SeoToolsError(Exception):
    """Base error for the SEO metadata builders."""


class ConfigurationError(SeoToolsError, ValueError):
    """Unknown or invalid option passed to a builder."""


class ValidationError(SeoToolsError, ValueError):
    """A required field is missing from a builder input."""
