"""
Lint script runner.
"""
import subprocess


def main():
    """
    Lint the Sprig project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./spriglang",
        "./sprig.py",
        "./vscode/server",
        "--exclude=spriglang/tests",
        "--max-line-length=120",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./spriglang",
        "./sprig.py",
        "--ignore=tests",
        "--max-line-length=120",
    ], check=True)


if __name__ == "__main__":
    main()
