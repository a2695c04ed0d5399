from pathlib import Path

# Repo-root conventional directories/files
CONFIG_DIR = Path("configs")
REPORT_CONFIG_FILE = CONFIG_DIR / "report.yaml"
