"""Shared StageResult body for the encode and decode commands."""

from collections.abc import Iterator

from ...utils.logger import get_logger
from .._output_schemas.cipher import CipherOutput
from ..StageResult import StageResult
from ._validate_depth import _validate_depth
from .CipherMode import CipherMode
from .parse_depth import parse_depth
from .RailFenceError import RailFenceError
from .transform import transform

logger = get_logger("cipher")


def _cipher_stage(text: str, depth: int | str, mode: CipherMode) -> StageResult:
    """Build the StageResult that runs one rail fence transform."""
    verb = "Encrypting" if mode is CipherMode.ENCRYPT else "Decrypting"

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.2, "Validating depth...")
        try:
            rails = parse_depth(depth) if isinstance(depth, str) else _validate_depth(depth)
        except RailFenceError as e:
            logger.warning(f"{mode.value} rejected: {e}")
            bad_depth = getattr(e, "depth", None)
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = CipherOutput(
                errors=[str(e)],
                warnings=[],
                mode=mode.value,
                depth=bad_depth if isinstance(bad_depth, int) and not isinstance(bad_depth, bool) else None,
                input=text,
                text="",
                length=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, f"{verb} {len(text)} characters on {rails} rails...")
        output_text = transform(text, rails, mode)

        warnings: list[str] = []
        if text and rails > len(text):
            warnings.append(f"Depth {rails} exceeds message length {len(text)}; some rails are empty")

        yield (1.0, "Complete")
        result_obj.result = f"{mode.label}: {output_text}"
        result_obj.output = CipherOutput(
            errors=[],
            warnings=warnings,
            mode=mode.value,
            depth=rails,
            input=text,
            text=output_text,
            length=len(output_text),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"{verb} text with rail fence cipher...",
        progress_callback=do_work,
    )
