from genderfromname.gender_names import (
    ConfigurationError,
    Gender,
    GenderConfig,
    GenderDetector,
    GenderFromNameError,
    InvalidInputError,
    gender,
    gender_init,
    get_match_list,
    set_match_list,
)

__version__ = "0.33.0"

__all__ = [
    "ConfigurationError",
    "Gender",
    "GenderConfig",
    "GenderDetector",
    "GenderFromNameError",
    "InvalidInputError",
    "gender",
    "gender_init",
    "get_match_list",
    "set_match_list",
]
