from .submit_contact_use_case import SubmitContactUseCase

__all__ = ["SubmitContactUseCase"]
