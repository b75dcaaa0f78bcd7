"""deinflector: table-driven suffix deinflection for dictionary lookup."""

from deinflector.conditions import ANY_MASK, Condition, ConditionRegistry
from deinflector.descriptor import (
    LanguageDescriptor,
    RuleDescriptor,
    TransformDescriptor,
    suffix_inflection,
    rewrite_inflection,
)
from deinflector.rules import Rule, Transform, TraceFrame
from deinflector.transformer import DeinflectionResult, InflectionRule, LanguageTransformer
from deinflector.engine import MultiLanguageTransformer, Lookup
from deinflector.coverage import check_coverage, load_cases
from deinflector.errors import (
    DeinflectorError,
    ConfigurationError,
    UnknownTagError,
    ConditionCycleError,
    TooManyConditionsError,
    RuleLengthError,
    UnsupportedLanguageError,
)

__all__ = [
    "ANY_MASK", "Condition", "ConditionRegistry",
    "LanguageDescriptor", "RuleDescriptor", "TransformDescriptor",
    "suffix_inflection", "rewrite_inflection",
    "Rule", "Transform", "TraceFrame",
    "DeinflectionResult", "InflectionRule", "LanguageTransformer",
    "MultiLanguageTransformer", "Lookup",
    "check_coverage", "load_cases",
    "DeinflectorError", "ConfigurationError", "UnknownTagError",
    "ConditionCycleError", "TooManyConditionsError", "RuleLengthError",
    "UnsupportedLanguageError",
]
