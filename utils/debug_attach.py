from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .test_result_parser import extract_test_host_pid


class AttachRequest(BaseModel):
    """Debug adapter request attaching to a running test host."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field("coreclr", description="Debug adapter type, e.g. 'coreclr' or 'netcoredbg'")
    name: str = Field("Attach to Test Host", description="Label shown by the debugger")
    request: str = Field("attach", description="Debug adapter request kind")
    process_id: int = Field(..., alias="processId", description="PID of the waiting test host")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


def attach_request_from_output(output: str, dap_type: str = "coreclr") -> Optional[AttachRequest]:
    """Build an attach request once the test host has announced its PID."""
    pid = extract_test_host_pid(output)
    if pid is None:
        return None
    return AttachRequest(type=dap_type, process_id=pid)
