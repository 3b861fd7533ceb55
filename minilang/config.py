"""
Pipeline configuration.

Defaults can be overridden from the environment:
    MINILANG_LEX_FAIL_FAST   stop tokenizing at the first bad character

Author: minilang developers
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass
class PipelineConfig:
    lexer_fail_fast: bool = False
    filename: str = "<input>"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineConfig":
        environ = os.environ if environ is None else environ
        config = cls()
        value = environ.get('MINILANG_LEX_FAIL_FAST')
        if value is not None:
            config.lexer_fail_fast = value.strip().lower() in _TRUTHY
        return config
