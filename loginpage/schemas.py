from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

CheckType = Literal[
    "status_ok",  # Added by the runner from the navigation response
    "contains_text",
    "element_exists",
    "button_exists",
    "assert_title"
]

class Check(BaseModel):
    type: CheckType
    selector: Optional[str] = None
    value: Optional[str] = None
    timeout_ms: Optional[int] = 5000

    @model_validator(mode='after')
    def require_target(self):
        """element_exists needs a selector, text checks need a value."""
        if self.type == "status_ok":
            return self
        if self.type == "element_exists":
            if not self.selector:
                raise ValueError("element_exists check requires a selector")
        elif not self.value:
            raise ValueError(f"{self.type} check requires a value")
        return self

    def describe(self) -> str:
        if self.type == "status_ok":
            return "page responds with a 2xx status"
        if self.type == "contains_text":
            return f"page contains text '{self.value}'"
        if self.type == "element_exists":
            return f"element '{self.selector}' exists"
        if self.type == "button_exists":
            return f"button labelled '{self.value}' exists"
        return f"title contains '{self.value}'"

class Scenario(BaseModel):
    name: str
    path: str = "/"
    checks: List[Check] = Field(default_factory=list)

    @field_validator('checks')
    @classmethod
    def reject_status_check(cls, v):
        """The response status is always checked by the runner itself."""
        if any(c.type == "status_ok" for c in v):
            raise ValueError("status_ok is checked automatically and cannot be listed")
        return v

class CheckResult(BaseModel):
    check: Check
    passed: bool
    message: str = ""

class ScenarioResult(BaseModel):
    scenario: str
    url: str
    results: List[CheckResult] = Field(default_factory=list)

    @property
    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]

    @property
    def passed(self) -> bool:
        return not self.failures
