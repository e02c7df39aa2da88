"""
Static catalogue of the tools exposed by the Baseline MCP server.
Descriptors are built once at import time and never change afterwards.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel

from baseline_mcp.models import ToolDescriptor, ToolHints

DOCS_BASE_URL = "https://baselinesoftware.readme.io/reference/"

LOAN_STATUSES = ["lead", "processing", "underwriting", "approved", "closed", "servicing", "archived"]
TASK_STATUSES = ["To Do", "In Progress", "Done", "Not Required"]


# ======================
# Schema helpers
# ======================

def _field(type_: str, description: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": type_}
    if description:
        schema["description"] = description
    schema.update(extra)
    return schema


def _string(description: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    return _field("string", description, **extra)


def _number(description: Optional[str] = None) -> Dict[str, Any]:
    return _field("number", description)


def _boolean(description: Optional[str] = None) -> Dict[str, Any]:
    return _field("boolean", description)


def _object(
    properties: Dict[str, Any],
    required: Optional[List[str]] = None,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    schema = _field("object", description, properties=properties)
    if required:
        schema["required"] = list(required)
    return schema


def _hints(kind: str, doc: str) -> ToolHints:
    """Map an operation kind to its side-effect hints."""
    return ToolHints(
        read_only=kind in ("get", "list"),
        destructive=kind == "delete",
        idempotent=kind in ("get", "list", "delete"),
        documentation_link=DOCS_BASE_URL + doc,
    )


def _tool(name: str, title: str, kind: str, doc: str, description: str, schema: Dict[str, Any]) -> ToolDescriptor:
    return ToolDescriptor(
        name=name,
        title=title,
        description=description,
        input_schema=schema,
        hints=_hints(kind, doc),
    )


PAGE_SCHEMA = _number("Page number for pagination (default: 0)")

LOAN_FIELDS = {
    "Name": _string("Property address or loan name"),
    "Status": _string("Loan workflow status", enum=LOAN_STATUSES),
    "Borrower_Name": _string("Primary borrower's name"),
    "Borrower_Email": _string("Primary borrower's email address"),
    "Address_Street1": _string("Property street address"),
    "Address_City": _string("Property city"),
    "Address_State": _string("Property state"),
    "Address_Zipcode": _string("Property ZIP code"),
    "Loan_Amount": _number("Loan amount in dollars"),
    "Rate": _number("Interest rate as decimal (e.g., 0.065 for 6.5%)"),
    "Origination": _string("Loan origination date (YYYY-MM-DD)"),
    "Maturity": _string("Loan maturity date (YYYY-MM-DD)"),
}

NEW_LOAN_FIELDS = {
    "Id": _string("(Optional) If not set, an ID will be generated automatically"),
    **LOAN_FIELDS,
    "Status": _string("Loan workflow status (default: servicing)", enum=LOAN_STATUSES),
    "Borrower_Email": _string("Primary borrower's email address - if borrower exists, will be attached to loan"),
    "Borrower_Id": _string("Primary borrower's ID - if borrower exists, will be attached to loan"),
}

SUBTASKS_SCHEMA = _field(
    "array",
    "Array of subtask objects",
    items=_object(
        {"Name": _string("Subtask name"), "Done": _boolean("Whether subtask is completed")},
        required=["Name"],
    ),
)

TASK_FIELDS = {
    "Name": _string("Task title/name"),
    "Description": _string("Task description"),
    "Date_Due": _string("Due date in YYYY-MM-DD format"),
    "Status": _string("Task status", enum=TASK_STATUSES),
    "Loan_Id": _string("ID of a loan to be associated with"),
    "Subtasks": SUBTASKS_SCHEMA,
}

PARTY_UPDATE_FIELDS = {
    "Name": _string(),
    "First_Name": _string(),
    "Last_Name": _string(),
    "Phone": _string(),
    "Date_Birth": _string("YYYY-MM-DD"),
    "Is_Company": _boolean(),
    "Address_Street1": _string(),
    "Address_Street2": _string(),
    "Address_City": _string(),
    "Address_State": _string(),
    "Address_Country": _string(),
}

PARTY_CREATE_FIELDS = {**PARTY_UPDATE_FIELDS, "Email": _string()}


# ======================
# Loans
# ======================

LOAN_TOOLS = [
    _tool(
        "getLoan", "Get Loan Details", "get", "get-a-loan",
        "Returns a loan including its address and borrower. Retrieves complete loan information "
        "including property details, borrower info, financial terms, status, dates, and metadata.",
        _object({"loanId": _string("The numerical ID of the loan to retrieve")}, required=["loanId"]),
    ),
    _tool(
        "listLoans", "Get All Loans", "list", "get-all-loans",
        "Returns a list of all loans in your account. Only basic information about the loans is "
        "returned (Id, Name, Status). This tool takes no parameters.\n\n"
        "Returns: Object containing a \"loans\" array and \"totalCount\". "
        "For complete loan details, use getLoan(loanId).",
        _object({}),
    ),
    _tool(
        "updateLoan", "Update Loan", "update", "modify-loan",
        "Updates specific fields of an existing loan. Only the fields you specify will be modified.\n\n"
        "Examples:\n"
        "- updateLoan({loanId: \"12345\", updates: {Status: \"underwriting\", Borrower_Name: \"John Doe\"}})\n"
        "- updateLoan({loanId: \"12345\", updates: {Loan_Amount: 350000, Rate: 0.065}})",
        _object(
            {
                "loanId": _string("The numerical ID of the loan to update"),
                "updates": _object(LOAN_FIELDS, description="The specific loan fields to update based on available API fields"),
            },
            required=["loanId", "updates"],
        ),
    ),
    _tool(
        "createLoan", "Create Loan", "create", "create-a-new-loan",
        "Creates a new loan. All loan fields are optional. Any field available in the default "
        "product in your account can be set by name.\n\n"
        "Example:\n"
        "- createLoan({loanData: {Name: \"123 Main St Property\", Status: \"lead\", Borrower_Name: \"John Doe\"}})\n\n"
        "Returns: Object containing complete loan details with all fields populated.",
        _object(
            {"loanData": _object(NEW_LOAN_FIELDS, description="Fields of the new loan")},
            required=["loanData"],
        ),
    ),
    _tool(
        "getLoanLedger", "Get Loan Ledger", "get", "get-a-loans-ledger",
        "Returns the top 50 transactions in the ledger of the loan. Associated payment, person, "
        "trust and charge details are included in each record if applicable.",
        _object({"loanId": _string("The numerical ID of the loan to retrieve the ledger for")}, required=["loanId"]),
    ),
]


# ======================
# Tasks
# ======================

TASK_TOOLS = [
    _tool(
        "getTask", "Get Task Details", "get", "get-a-task",
        "Retrieves complete task information including task details, status, due date, "
        "and associated loan.",
        _object({"taskId": _string("The numerical ID of the task to retrieve")}, required=["taskId"]),
    ),
    _tool(
        "listTasks", "Get All Tasks", "list", "get-all-tasks",
        "Retrieves a list of all tasks with pagination support.\n\n"
        "Examples:\n- listTasks() - Get first page of all tasks\n- listTasks({page: 2}) - Get second page of tasks",
        _object({"page": PAGE_SCHEMA}),
    ),
    _tool(
        "createTask", "Create Task", "create", "create-a-new-task",
        "Creates a new task. All fields are optional except task name.\n\n"
        "Example:\n- createTask({Name: \"Review credit score\", Status: \"To Do\", Date_Due: \"2024-12-31\"})",
        _object(TASK_FIELDS, required=["Name"]),
    ),
    _tool(
        "updateTask", "Update Task", "update", "modify-existing-task",
        "Updates specific fields of an existing task. Only the fields you specify will be modified.\n\n"
        "Example:\n- updateTask({taskId: \"1234\", updates: {Status: \"Done\"}})",
        _object(
            {
                "taskId": _string("The numerical ID of the task to update"),
                "updates": _object(TASK_FIELDS, description="The specific task fields to update"),
            },
            required=["taskId", "updates"],
        ),
    ),
    _tool(
        "deleteTask", "Delete Task", "delete", "delete-a-task",
        "Deletes a task.",
        _object({"taskId": _string("The numerical ID of the task to delete")}, required=["taskId"]),
    ),
]


# ======================
# Borrowers, vendors, investors
# ======================

class PartyResource(BaseModel):
    """A person-or-company resource family with the same seven operations.

    Attributes:
        name: Singular resource name, also the URL segment (e.g. "borrower")
        article: Indefinite article used in descriptions ("a" / "an")
        docs: Documentation slug per operation kind
    """
    name: str
    article: str = "a"
    docs: Dict[str, str]

    @property
    def title(self) -> str:
        return self.name.capitalize()

    @property
    def plural(self) -> str:
        return f"{self.name}s"

    @property
    def id_field(self) -> str:
        return f"{self.name}Id"

    @property
    def data_field(self) -> str:
        return f"{self.name}Data"

    @property
    def connect_field(self) -> str:
        return f"connectTo{self.title}Id"

    @property
    def disconnect_field(self) -> str:
        return f"disconnectFrom{self.title}Id"

    def tool_name(self, kind: str) -> str:
        if kind == "list":
            return f"list{self.title}s"
        if kind in ("connect", "disconnect"):
            return f"{kind}{self.title}s"
        return f"{kind}{self.title}"

    def descriptors(self) -> List[ToolDescriptor]:
        name, title, plural = self.name, self.title, self.plural

        def id_schema(verb: str) -> Dict[str, Any]:
            return _string(f"The ID of the {name} to {verb}.")

        return [
            _tool(
                self.tool_name("create"), f"Create {title}", "create", self.docs["create"],
                f"Creates a new {name}.",
                _object(
                    {self.data_field: _object(PARTY_CREATE_FIELDS, description=f"Data for the new {name}.")},
                    required=[self.data_field],
                ),
            ),
            _tool(
                self.tool_name("list"), f"Get All {title}s", "list", self.docs["list"],
                f"Retrieves a list of all {plural}.",
                _object({"page": PAGE_SCHEMA}),
            ),
            _tool(
                self.tool_name("get"), f"Get {title}", "get", self.docs["get"],
                f"Retrieves a specific {name} by their ID.",
                _object({self.id_field: id_schema("retrieve")}, required=[self.id_field]),
            ),
            _tool(
                self.tool_name("update"), f"Update {title}", "update", self.docs["update"],
                f"Updates an existing {name}'s information.",
                _object(
                    {
                        self.id_field: id_schema("update"),
                        "updates": _object(PARTY_UPDATE_FIELDS, description=f"The fields to update for the {name}."),
                    },
                    required=[self.id_field, "updates"],
                ),
            ),
            _tool(
                self.tool_name("delete"), f"Delete {title}", "delete", self.docs["delete"],
                f"Deletes a specific {name} by their ID.",
                _object({self.id_field: id_schema("delete")}, required=[self.id_field]),
            ),
            _tool(
                self.tool_name("connect"), f"Connect {title}s", "connect", self.docs["connect"],
                f"Connects {self.article} {name} to another {name} (e.g., a person to a company).",
                _object(
                    {
                        self.id_field: _string(f"The ID of the first {name}."),
                        self.connect_field: _string(f"The ID of the {name} to connect to."),
                    },
                    required=[self.id_field, self.connect_field],
                ),
            ),
            _tool(
                self.tool_name("disconnect"), f"Disconnect {title}s", "disconnect", self.docs["disconnect"],
                f"Disconnects {self.article} {name} from another {name}.",
                _object(
                    {
                        self.id_field: _string(f"The ID of the first {name}."),
                        self.disconnect_field: _string(f"The ID of the {name} to disconnect from."),
                    },
                    required=[self.id_field, self.disconnect_field],
                ),
            ),
        ]


BORROWER = PartyResource(
    name="borrower",
    docs={
        "create": "create-a-new-borrower",
        "list": "get-all-borrowers",
        "get": "get-a-borrower",
        "update": "modify-borrower",
        "delete": "delete-borrower",
        "connect": "connect-borrowers",
        "disconnect": "disconnect-borrowers",
    },
)

VENDOR = PartyResource(
    name="vendor",
    docs={
        "create": "create-a-new-vendor",
        "list": "get-all-vendors",
        "get": "get-a-vendor",
        "update": "modify-an-existing-vendor",
        "delete": "delete-a-vendor",
        "connect": "connect-a-vendor-to-another-vendor",
        "disconnect": "delete-connection-vendor-from-another-vendor",
    },
)

INVESTOR = PartyResource(
    name="investor",
    article="an",
    docs={
        "create": "create-a-new-investor",
        "list": "get-all-investor",
        "get": "get-an-investor",
        "update": "modify-an-existing-investor",
        "delete": "delete-an-investor",
        "connect": "connect-a-investor-to-another-investor",
        "disconnect": "delete-investor-connections-from-another-investor",
    },
)

PARTY_RESOURCES = (BORROWER, VENDOR, INVESTOR)


def _build_registry() -> Tuple[ToolDescriptor, ...]:
    descriptors = [*LOAN_TOOLS, *TASK_TOOLS]
    for party in PARTY_RESOURCES:
        descriptors.extend(party.descriptors())

    names = [descriptor.name for descriptor in descriptors]
    duplicates = {name for name in names if names.count(name) > 1}
    if duplicates:
        raise RuntimeError(f"Duplicate tool names: {sorted(duplicates)}")
    return tuple(descriptors)


TOOL_DESCRIPTORS = _build_registry()
_BY_NAME = {descriptor.name: descriptor for descriptor in TOOL_DESCRIPTORS}


def get_descriptor(name: str) -> Optional[ToolDescriptor]:
    return _BY_NAME.get(name)


def tool_names() -> List[str]:
    return [descriptor.name for descriptor in TOOL_DESCRIPTORS]
