"""Extractors that decode the raw fields of compiler timing output."""

from .duration import parse_compile_duration
from .flags import COMPILER_FLAG, has_compiler_flag
from .location import FILE_URL_PREFIX, decode_location, prefix_with_file_url
from .timing_lines import INVALID_LOCATION, TimingLineMatcher, default_matcher

__all__ = [
	"COMPILER_FLAG",
	"FILE_URL_PREFIX",
	"INVALID_LOCATION",
	"TimingLineMatcher",
	"decode_location",
	"default_matcher",
	"has_compiler_flag",
	"parse_compile_duration",
	"prefix_with_file_url",
]
