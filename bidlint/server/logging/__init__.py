from .result_payloads import validation_result_to_loggable

__all__ = ["validation_result_to_loggable"]
