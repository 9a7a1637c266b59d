from .get_settings_use_case import GetSettingsUseCase
from .update_settings_use_case import UpdateSettingsUseCase

__all__ = ["GetSettingsUseCase", "UpdateSettingsUseCase"]
