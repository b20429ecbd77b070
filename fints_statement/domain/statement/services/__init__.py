from .capability_resolver import CapabilityResolver
from .request_variant_factory import RequestVariantFactory
from .response_validator import ResponseValidator, ResponseVerdict
from .statement_assembler import ParsedFragment, StatementAssembler

__all__ = [
    "CapabilityResolver",
    "RequestVariantFactory",
    "ResponseValidator",
    "ResponseVerdict",
    "ParsedFragment",
    "StatementAssembler",
]
