from __future__ import annotations

from pathlib import Path

from famtext.core.context import ImportContext
from famtext.core.exceptions import ParseExecutionError, TreeImportError
from famtext.import_core import TreeImporter
from famtext.loader import iter_lines


def tree_file_path(output_path: str | Path) -> Path:
    """Ensure the tree file name carries a ``.json`` suffix."""
    path = Path(output_path)
    if path.suffix.lower() != ".json":
        path = path.with_name(path.name + ".json")
    return path


class Pipeline:
    """
    Reads one text file, imports it and writes the tree JSON.
    No import logic lives here.
    """

    def __init__(self, context: ImportContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> Path:
        self.log.info("Pipeline starting")

        try:
            text = Path(self.ctx.input_path).read_text(encoding="utf-8-sig")

            importer = TreeImporter(config=self.ctx.config)
            result = importer.run(text)
            if result.error is not None:
                self.ctx.errors.append(result.error.message)
                raise result.error

            out_path = tree_file_path(self.ctx.output_path)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(result.document, encoding="utf-8")

            self.ctx.stats.update(
                lines=sum(1 for _ in iter_lines(text)),
                people=len(result.people),
                generations=result.level_result.generations,
            )
            self.log.info("Pipeline completed successfully: %s", out_path)
            return out_path

        except TreeImportError:
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc
