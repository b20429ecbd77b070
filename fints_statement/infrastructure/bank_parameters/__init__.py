from .static_bank_parameters import StaticBankParameterData

__all__ = ["StaticBankParameterData"]
