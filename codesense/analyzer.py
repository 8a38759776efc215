import json
import os
import traceback
from typing import Any, Dict, List, Optional

from .completion.service import CompletionService
from .exceptions import CodesenseError, ParseError
from .parser.parser import parse_program
from .parser.tokenizer import tokenize
from .symbols.scope_builder import build_scopes
from .utils import AnalysisArtifactEncoder

# Stage names in pipeline order.
STAGES = ("tokens", "ast", "scopes", "completions")


class AnalysisPipeline:
    """
    Runs a document through the analysis stages: tokens, AST, scope tree and
    finally the completions at a cursor offset. Every stage's product is kept
    in `artifacts` and can be dumped to `<file>.<stage>.json`.

    Only JavaScript has the first three stages; HTML and CSS documents go
    straight to completion.
    """

    def __init__(
        self,
        source_content: str,
        file_path: Optional[str] = None,
        language: str = "javascript",
        offset: Optional[int] = None,
        dump_stages: Optional[List[str]] = None,
        stop_after_stage: Optional[str] = None,
    ):
        self.source_content = source_content
        self.file_path = os.path.abspath(file_path) if file_path else "<stdin>"
        self.language = language
        self.offset = len(source_content) if offset is None else offset
        self.dump_stages = dump_stages or []
        self.stop_after_stage = stop_after_stage
        self.artifacts: Dict[str, Any] = {}
        self.results: List[Any] = []
        self.parse_error: Optional[ParseError] = None

    def run(self) -> Any:
        """Executes the stages in order and returns the product of the last one run."""
        try:
            if self.language == "javascript":
                # --- Stage 1: Tokens ---
                self._run_stage("tokens", tokenize, self.source_content)
                if self.stop_after_stage == "tokens":
                    return self.results[-1]

                # --- Stage 2: AST ---
                try:
                    self._run_stage("ast", parse_program, self.source_content)
                except ParseError as e:
                    if self.stop_after_stage in ("ast", "scopes"):
                        raise
                    # Completion recovers from the text before the cursor.
                    self.parse_error = e
                else:
                    if self.stop_after_stage == "ast":
                        return self.results[-1]

                    # --- Stage 3: Scope tree ---
                    self._run_stage("scopes", build_scopes, self.results[-1])
                    if self.stop_after_stage == "scopes":
                        return self.results[-1]

            # --- Stage 4: Completions ---
            self._run_stage("completions", self._complete)
            return self.results[-1]

        except CodesenseError:
            raise
        except Exception as e:
            traceback.print_exc()
            raise Exception(f"An unexpected internal error occurred: {e}") from e

    def _complete(self):
        service = CompletionService(self.language)
        service.update_document(self.source_content)
        return service.get_completions(self.offset)

    def _run_stage(self, name: str, func, *args, **kwargs) -> Any:
        """Runs a single function as a stage, storing and returning its result."""
        result = func(*args, **kwargs)
        self.artifacts[name] = result
        self.results.append(result)
        if name in self.dump_stages:
            self.save_artifact(name, result)
        return result

    def artifact_path(self, name: str) -> str:
        if self.file_path == "<stdin>":
            base_name = "stdin_output"
        else:
            base_name = os.path.splitext(self.file_path)[0]
        return f"{base_name}.{name}.json"

    def save_artifact(self, name: str, data: Any):
        """Saves a stage artifact next to the input file."""
        output_path = self.artifact_path(name)
        print(f"--- Saving artifact '{name}' to {output_path} ---")
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=False, cls=AnalysisArtifactEncoder)
        except OSError as e:
            print(f"Error: Could not save artifact '{name}': {e}")


def analyze_document(
    source_content: str,
    file_path: Optional[str] = None,
    language: str = "javascript",
    offset: Optional[int] = None,
    dump_stages: Optional[List[str]] = None,
    stop_after_stage: Optional[str] = None,
):
    """High-level entry point for the analysis pipeline."""
    pipeline = AnalysisPipeline(source_content, file_path, language, offset, dump_stages, stop_after_stage)
    return pipeline.run()
