from inspect import getfile, getsourcelines
from os.path import basename
from time import time
from typing import Any, Callable

from pydantic import BaseModel

from ride_reservation.platform.logging.loguru_io_config import (
    MAX_LOG_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def increase_call_depth() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if layer <= 0:
        chain_start_time_var.set(0)


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def mask_sensitive(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return mask_sensitive(data.model_dump())
    if isinstance(data, dict):
        return {key: mask_sensitive(should_mask_keyword(key, value)) for key, value in data.items()}
    if isinstance(data, list | tuple):
        return type(data)(mask_sensitive(item) for item in data)
    return data


def truncate_content(data: Any) -> Any:
    text = str(data)
    if len(text) <= MAX_LOG_CONTENT_LENGTH:
        return data
    return f'{text[:MAX_LOG_CONTENT_LENGTH]}...(+{len(text) - MAX_LOG_CONTENT_LENGTH} chars)'
