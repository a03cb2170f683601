from .DelimiterConfig import DelimiterConfig

# GitHub-inspired defaults: path#L10C5-L20C10
DEFAULT_DELIMITERS = DelimiterConfig(line="L", position="C", hash="#", range="-")
