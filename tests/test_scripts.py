import importlib.util
from pathlib import Path

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_run_textual_accepts_log_level():
    parser = _load_script("run_textual").build_parser()
    args = parser.parse_args(["--log-level", "debug", "--log-file", "forsaken.log"])
    assert args.log_level == "debug"
    assert args.log_file == "forsaken.log"
    assert parser.parse_args([]).log_level == "WARNING"
