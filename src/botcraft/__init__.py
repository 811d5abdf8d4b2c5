from __future__ import annotations

from .api import Api, ApiError, ResponseError, ResponseParameters
from .codec import CodecError
from .config import ApiConfig, ConfigError, load_api_config
from .request import Form, FormValue, InputFile, InputFileError, Request, RequestBody, RequestMethod

__all__ = [
    "Api",
    "ApiConfig",
    "ApiError",
    "CodecError",
    "ConfigError",
    "Form",
    "FormValue",
    "InputFile",
    "InputFileError",
    "Request",
    "RequestBody",
    "RequestMethod",
    "ResponseError",
    "ResponseParameters",
    "load_api_config",
]
