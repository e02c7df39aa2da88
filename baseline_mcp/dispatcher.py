"""
Tool dispatcher for the Baseline MCP server.
Maps each tool name to exactly one Baseline API call and wraps the outcome
in a ToolResult. Tool failures are returned, never raised.
"""

import logging
from functools import partial
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

from baseline_mcp.client import BaselineClient
from baseline_mcp.config import BaselineConfig
from baseline_mcp.errors import BaselineError, UnknownToolError
from baseline_mcp.models import ToolResult
from baseline_mcp.registry import PARTY_RESOURCES, PartyResource
from baseline_mcp.validation import (
    check_page,
    require_fields,
    require_identifier,
    require_identifiers,
    require_object,
    sanitize_structure,
    sanitize_text,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Awaitable[Any]]


class ToolDispatcher:
    """Routes tool invocations to the Baseline API.

    Attributes:
        client: Upstream API client
        config: Settings consulted per call (e.g. the update-loan verb)
    """

    def __init__(self, client: BaselineClient, config: Optional[BaselineConfig] = None):
        self.client = client
        self.config = config or client.config
        self._routes: Dict[str, Tuple[str, Handler]] = {
            "getLoan": ("retrieving loan", self.get_loan),
            "listLoans": ("listing loans", self.list_loans),
            "updateLoan": ("updating loan", self.update_loan),
            "createLoan": ("creating loan", self.create_loan),
            "getLoanLedger": ("retrieving loan ledger", self.get_loan_ledger),
            "getTask": ("retrieving task", self.get_task),
            "listTasks": ("listing tasks", self.list_tasks),
            "createTask": ("creating task", self.create_task),
            "updateTask": ("updating task", self.update_task),
            "deleteTask": ("deleting task", self.delete_task),
        }
        for party in PARTY_RESOURCES:
            self._routes.update(self._party_routes(party))

    def has_tool(self, name: str) -> bool:
        return name in self._routes

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run one tool invocation.

        Args:
            name: Registered tool name
            arguments: Tool arguments as received from the client

        Returns:
            A success result carrying the upstream body as JSON text, or an
            error result of the form "Error <action>: <reason>"

        Raises:
            UnknownToolError: no tool is registered under this name
        """
        try:
            action, handler = self._routes[name]
        except KeyError:
            raise UnknownToolError(name) from None

        try:
            data = await handler(arguments or {})
        except BaselineError as exc:
            logger.info("Tool %s failed (%s): %s", name, exc.kind.value, exc.render())
            return ToolResult.failure(f"Error {action}: {exc.render()}")
        return ToolResult.success(data)

    async def _call(self, method: str, path: str, body: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self.client.request(method, path, body, params)
        return response["data"]

    async def _list(self, path: str, args: Mapping[str, Any]) -> Any:
        page = check_page(args)
        # page 0 is the upstream default
        params = {"page": page} if page else None
        return await self._call("GET", path, params=params)

    # ======================
    # Loans
    # ======================

    async def get_loan(self, args: Mapping[str, Any]) -> Any:
        loan_id = sanitize_text(require_identifier(args, "loanId"))
        return await self._call("GET", f"/loan/{loan_id}")

    async def list_loans(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        data = await self._call("GET", "/loan")
        loans = data.get("loans") if isinstance(data, dict) else None
        if loans is None:
            loans = data
        return {
            "loans": loans,
            "totalCount": len(loans) if isinstance(loans, list) else 0,
        }

    async def update_loan(self, args: Mapping[str, Any]) -> Any:
        loan_id = sanitize_text(require_identifier(args, "loanId"))
        updates = sanitize_structure(require_object(args, "updates"))
        return await self._call(self.config.update_loan_method, f"/loan/{loan_id}", updates)

    async def create_loan(self, args: Mapping[str, Any]) -> Any:
        loan_data = sanitize_structure(require_object(args, "loanData"))
        return await self._call("POST", "/loan", loan_data)

    async def get_loan_ledger(self, args: Mapping[str, Any]) -> Any:
        loan_id = sanitize_text(require_identifier(args, "loanId"))
        return await self._call("GET", f"/loan/{loan_id}/transaction")

    # ======================
    # Tasks
    # ======================

    async def get_task(self, args: Mapping[str, Any]) -> Any:
        task_id = sanitize_text(require_identifier(args, "taskId"))
        return await self._call("GET", f"/task/{task_id}")

    async def list_tasks(self, args: Mapping[str, Any]) -> Any:
        return await self._list("/task", args)

    async def create_task(self, args: Mapping[str, Any]) -> Any:
        require_fields(args, ["Name"])
        return await self._call("POST", "/task", sanitize_structure(args))

    async def update_task(self, args: Mapping[str, Any]) -> Any:
        task_id = sanitize_text(require_identifier(args, "taskId"))
        updates = sanitize_structure(require_object(args, "updates"))
        return await self._call("PATCH", f"/task/{task_id}", updates)

    async def delete_task(self, args: Mapping[str, Any]) -> Any:
        task_id = sanitize_text(require_identifier(args, "taskId"))
        return await self._call("DELETE", f"/task/{task_id}")

    # ======================
    # Borrowers, vendors, investors
    # ======================

    def _party_routes(self, party: PartyResource) -> Dict[str, Tuple[str, Handler]]:
        name, plural = party.name, party.plural
        return {
            party.tool_name("create"): (f"creating {name}", partial(self.create_party, party)),
            party.tool_name("list"): (f"listing {plural}", partial(self.list_parties, party)),
            party.tool_name("get"): (f"retrieving {name}", partial(self.get_party, party)),
            party.tool_name("update"): (f"updating {name}", partial(self.update_party, party)),
            party.tool_name("delete"): (f"deleting {name}", partial(self.delete_party, party)),
            party.tool_name("connect"): (f"connecting {plural}", partial(self.connect_parties, party)),
            party.tool_name("disconnect"): (f"disconnecting {plural}", partial(self.disconnect_parties, party)),
        }

    async def create_party(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        data = sanitize_structure(require_object(args, party.data_field))
        return await self._call("POST", f"/{party.name}", data)

    async def list_parties(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        return await self._list(f"/{party.name}", args)

    async def get_party(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        party_id = sanitize_text(require_identifier(args, party.id_field))
        return await self._call("GET", f"/{party.name}/{party_id}")

    async def update_party(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        party_id = sanitize_text(require_identifier(args, party.id_field))
        updates = sanitize_structure(require_object(args, "updates"))
        return await self._call("PATCH", f"/{party.name}/{party_id}", updates)

    async def delete_party(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        party_id = sanitize_text(require_identifier(args, party.id_field))
        return await self._call("DELETE", f"/{party.name}/{party_id}")

    async def connect_parties(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        party_id, other_id = map(sanitize_text, require_identifiers(args, party.id_field, party.connect_field))
        return await self._call("PUT", f"/{party.name}/{party_id}/connect/{other_id}", {})

    async def disconnect_parties(self, party: PartyResource, args: Mapping[str, Any]) -> Any:
        party_id, other_id = map(sanitize_text, require_identifiers(args, party.id_field, party.disconnect_field))
        return await self._call("DELETE", f"/{party.name}/{party_id}/connect/{other_id}")
