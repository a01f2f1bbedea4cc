from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

CompilationOutcome = Literal["compiled", "compile_failure", "launch_failure", "timed_out"]


class CompilationResult(BaseModel):
    """Verdict for a single compiled source file."""
    success: bool = Field(..., description="True only if the artifact exists and no diagnostics were emitted")
    diagnostics: str = Field("", description="Raw text captured from the compiler")
    outcome: CompilationOutcome = Field(..., description="Why the compilation ended the way it did")
    source_path: str = Field(..., description="Source file that was compiled")
    artifact_path: Optional[str] = Field(None, description="Expected compiled artifact path")
    error_count: int = Field(0, description="Errors reported in the diagnostics")
    warning_count: int = Field(0, description="Warnings reported in the diagnostics")

    def as_pair(self) -> Tuple[bool, str]:
        """Return the (success, diagnostics) pair."""
        return self.success, self.diagnostics


class TestCasesCompilationResult(BaseModel):
    """Verdict for a batch of generated test files."""
    __test__ = False

    all_test_cases_compilable: bool = Field(..., description="True if every file compiled")
    compilable_test_cases: List[str] = Field(default_factory=list, description="Files that compiled, in input order")
    results: Dict[str, CompilationResult] = Field(default_factory=dict, description="Per-file results")
