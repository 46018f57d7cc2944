# -*- coding: utf-8 -*-

import subprocess

from pathlib_mate import Path

dir_project_root = Path.dir_here(__file__).parent.parent


def run_cov_test(script: str, module: str):
    """
    Run a single test file with coverage report for a single module.
    """
    args = [
        "pytest",
        "-s",
        "--tb=native",
        f"--rootdir={dir_project_root}",
        f"--cov={module}",
        "--cov-report",
        "term-missing",
        script,
    ]
    subprocess.run(args)
