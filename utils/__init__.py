# utils package

"""
Utilities module for target discovery, command planning and user output.
"""

from .logging import setup_logging
from .colors import notify
from .target_finder import find_dotnet_target
from .test_filter import method_filter, types_filter
from .test_plan import DotnetRunPlan, plan_test_run
from .test_result_parser import extract_test_host_pid
from .debug_attach import AttachRequest, attach_request_from_output

__all__ = [
    'setup_logging',
    'notify',
    'find_dotnet_target',
    'method_filter',
    'types_filter',
    'DotnetRunPlan',
    'plan_test_run',
    'extract_test_host_pid',
    'AttachRequest',
    'attach_request_from_output'
]
