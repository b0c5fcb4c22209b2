"""lintmap — PMD adapter: SARIF results and generated rulesets."""

__version__ = "0.1.0"
