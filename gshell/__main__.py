"""
This allows the CLI to be run as a module with `python -m gshell`.
"""
from dotenv import load_dotenv
load_dotenv()

from .main import main

if __name__ == "__main__":
    main()
