from longhand.model.outcome import Outcome, Status

__all__ = ["Outcome", "Status"]
