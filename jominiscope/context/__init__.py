"""Cursor-position context resolution for Jomini game scripts."""

from jominiscope.context.blocks import (
    ACTION_BLOCKS,
    CONDITION_BLOCKS,
    CONDITION_BLOCKS_WITH_PARAMS,
    SCRIPT_VALUE_BLOCKS,
    WEIGHT_BLOCKS,
    ConditionBlockParams,
)
from jominiscope.context.classifier import classify_block, extra_block_parameters
from jominiscope.context.cursor import CursorLineContext, analyze_cursor_line
from jominiscope.context.mode import COMPARISON_OPERATORS, BlockOperator, Mode
from jominiscope.context.options import ResolveOptions
from jominiscope.context.paths import (
    ScopePathResult,
    looks_like_scope_path,
    output_type_for_path,
    split_scope_path,
    validate_scope_path,
)
from jominiscope.context.resolve import (
    ResolvedPositionContext,
    lines_accessor,
    resolve_position,
    resolve_text_position,
)
from jominiscope.context.scanner import (
    BLOCK_START_PATTERN,
    BlockFrame,
    LineProvider,
    ScannedBlocks,
    find_immediate_parent_block,
    iter_scan_points,
    scan_blocks,
    strip_comment,
)
from jominiscope.context.tracker import (
    is_numeric_block,
    is_scope_reference,
    lookup_output_type,
    track_scope,
)

__all__ = [
    "ACTION_BLOCKS",
    "BLOCK_START_PATTERN",
    "COMPARISON_OPERATORS",
    "CONDITION_BLOCKS",
    "CONDITION_BLOCKS_WITH_PARAMS",
    "SCRIPT_VALUE_BLOCKS",
    "WEIGHT_BLOCKS",
    "BlockFrame",
    "BlockOperator",
    "ConditionBlockParams",
    "CursorLineContext",
    "LineProvider",
    "Mode",
    "ResolveOptions",
    "ResolvedPositionContext",
    "ScannedBlocks",
    "ScopePathResult",
    "analyze_cursor_line",
    "classify_block",
    "extra_block_parameters",
    "find_immediate_parent_block",
    "is_numeric_block",
    "iter_scan_points",
    "is_scope_reference",
    "lines_accessor",
    "looks_like_scope_path",
    "lookup_output_type",
    "output_type_for_path",
    "resolve_position",
    "resolve_text_position",
    "scan_blocks",
    "split_scope_path",
    "strip_comment",
    "track_scope",
    "validate_scope_path",
]
