"""
Pipeline driver: runs tokenizer, syntax checker and semantic checker in
order, stopping after the first stage that fails.

Author: minilang developers
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .config import PipelineConfig
from .lexer import LexResult, tokenize
from .lexer.errors import LEXICAL_ERROR_PREFIX
from .parser import check_syntax
from .parser.errors import SYNTAX_ERROR_PREFIX
from .analyzer import check_semantics
from .analyzer.errors import SEMANTIC_ERROR_PREFIX

logger = logging.getLogger(__name__)

_ERROR_PREFIXES = (LEXICAL_ERROR_PREFIX, SYNTAX_ERROR_PREFIX, SEMANTIC_ERROR_PREFIX)


def is_error(verdict: Optional[str]) -> bool:
    """Check whether a verdict string reports an error."""
    return verdict is not None and verdict.startswith(_ERROR_PREFIXES)


@dataclass
class AnalysisResult:
    """
    Results of one analysis.

    ``syntax`` is None when tokenizing failed; ``semantic`` is None when
    either earlier stage failed.
    """
    lexical: LexResult
    syntax: Optional[str] = None
    semantic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return (self.lexical.ok and self.syntax is not None and not is_error(self.syntax)
                and self.semantic is not None and not is_error(self.semantic))

    @property
    def stage_failed(self) -> Optional[str]:
        """Name of the stage that failed, or None if all passed."""
        if not self.lexical.ok:
            return "lexical"
        if is_error(self.syntax):
            return "syntax"
        if is_error(self.semantic):
            return "semantic"
        return None

    def to_dict(self) -> Dict[str, Any]:
        lexical: Dict[str, Any] = {
            "tokens": [
                {"text": t.lexeme, "kind": t.type.label, "offset": t.offset}
                for t in self.lexical.tokens
            ],
            "errors": [
                {"message": e.message, "character": e.character, "offset": e.offset}
                for e in self.lexical.errors
            ],
        }
        result: Dict[str, Any] = {"lexical": lexical}
        if self.syntax is not None:
            result["syntax"] = self.syntax
        if self.semantic is not None:
            result["semantic"] = self.semantic
        return result


def analyze(source: str, config: Optional[PipelineConfig] = None) -> AnalysisResult:
    """
    Analyze ``source`` through all three stages.

    Args:
        source: Source code string
        config: Pipeline options; defaults to PipelineConfig()

    Returns:
        AnalysisResult with the verdict of every stage that ran
    """
    config = config or PipelineConfig()

    lexical = tokenize(source, config.filename, fail_fast=config.lexer_fail_fast)
    if not lexical.ok:
        logger.info("%s: lexical analysis failed with %d error(s)", config.filename, len(lexical.errors))
        return AnalysisResult(lexical=lexical)

    syntax = check_syntax(lexical.tokens)
    if is_error(syntax):
        logger.info("%s: %s", config.filename, syntax)
        return AnalysisResult(lexical=lexical, syntax=syntax)

    semantic = check_semantics(lexical.tokens)
    logger.info("%s: %s", config.filename, semantic)
    return AnalysisResult(lexical=lexical, syntax=syntax, semantic=semantic)


def analyze_file(path: str, config: Optional[PipelineConfig] = None) -> AnalysisResult:
    """Read a UTF-8 source file and analyze it."""
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    config = replace(config or PipelineConfig(), filename=path)
    return analyze(source, config)
