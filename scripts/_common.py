from pathlib import Path

RES_DIR = Path(__file__).resolve().parent.parent / "res"
