"""Analysis of a compiled output directory, start to finish."""

from pathlib import Path
from typing import Optional, Union

from .analyzer import analyze_output
from .config import JoutConfig
from .exceptions import InvalidPathError
from .file_ops import list_files
from .logging_config import get_logger
from .models import BytecodeReport
from .shell import run_command
from .strategies import Runner, get_strategy
from .toolchain import locate_disassembler

logger = get_logger(__name__)


def analyze(
    output_dir: Union[str, Path],
    config: Optional[JoutConfig] = None,
    disassembler: Optional[Path] = None,
    runner: Runner = run_command,
) -> BytecodeReport:
    """Disassemble every class file under output_dir and gather statistics.

    Args:
        output_dir: Root of the compiled output
        config: Run settings (defaults when None)
        disassembler: javap to use (located from config.java_home when None)
        runner: Command runner, replaceable for tests

    Raises:
        InvalidPathError: If output_dir does not exist
        DisassemblerNotFoundError: If javap cannot be found
        DirectoryTraversalError: If the output tree cannot be listed
        ProcessError: If a javap run fails
    """
    config = config or JoutConfig()
    root = str(output_dir)

    if not Path(root).exists():
        raise InvalidPathError(Path(root), "does not exist")

    if disassembler is None:
        disassembler = locate_disassembler(config.java_home)

    class_files = list_files(root, config.class_suffix)
    logger.info("Found %d class files under %s", len(class_files), root)

    strategy = get_strategy(config.strategy)(disassembler, config, runner)
    bytecode = strategy.collect(root, class_files)
    output = analyze_output(class_files)

    return BytecodeReport(
        output_dir=root,
        output=output,
        bytecode=bytecode,
        strategy=strategy.name,
        invocations=strategy.invocations,
    )
