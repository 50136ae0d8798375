"""Tool discovery for agents.

Agents find the five_whys tool here: its name, the instructions that
keep them calling once per step, and the JSON schema of its arguments.
Calls themselves go to POST /v1/five-whys.
"""

from typing import Any

from five_whys.api.models.five_whys import FiveWhysRequest

TOOL_NAME = "five_whys"

TOOL_DESCRIPTION = (
    "CRITICAL: You MUST call this tool for each step. Do NOT think through the "
    "analysis yourself. FIRST CALL: Provide ONLY 'problem' parameter. The tool "
    "creates a session and returns a sessionId. SUBSEQUENT CALLS: Use the "
    "returned sessionId + 'currentReason' (your answer to the previous why). "
    "Continue until tool says 'ANALYSIS COMPLETE'."
)

USAGE_INSTRUCTIONS = """\
This tool implements the 5-Whys root cause analysis technique.

CRITICAL WARNING: You MUST call this tool for each step. Do NOT think through the analysis yourself.

USAGE PATTERN:
1. FIRST CALL: {"problem": "your problem statement"}
   -> Tool creates session and returns sessionId + first why question
2. SUBSEQUENT CALLS: {"sessionId": "returned_session_id", "currentReason": "your answer"}
   -> Tool asks next why question
3. CONTINUE until tool returns "ANALYSIS COMPLETE"

WHAT NOT TO DO:
- Do NOT generate session IDs yourself
- Do NOT set needsMoreWhys yourself
- Do NOT provide all 5 answers at once

WHAT TO DO:
- Call the tool for EACH why question
- Use the sessionId returned by the tool
- Provide ONE answer per call
- Continue until tool says "ANALYSIS COMPLETE"
"""


class MCPToolServer:
    """Read-only catalog of the tools this service exposes."""

    def list_tools(self) -> list[dict[str, Any]]:
        return [self.get_tool(TOOL_NAME)]

    def get_tool(self, name: str) -> dict[str, Any]:
        """Describe a tool by name.

        Raises:
            KeyError: If no tool has that name
        """
        if name != TOOL_NAME:
            raise KeyError(name)
        return {
            "name": TOOL_NAME,
            "description": TOOL_DESCRIPTION,
            "inputSchema": FiveWhysRequest.model_json_schema(by_alias=True),
            "usageInstructions": USAGE_INSTRUCTIONS,
            "endpoint": "/v1/five-whys",
        }
