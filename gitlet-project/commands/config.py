# The command: gitlet config <key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., log.dateformat)
# How it does: It passes the key and value to the `write_config` function in `utils/config.py`, which handles the file I/O and parsing logic
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by `utils/config.py`

from utils import repository, config as config_utils
from utils.errors import NotInitialized


def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        raise NotInitialized()
    config_utils.write_config(repo_root, args.key, args.value)
    print(f"Set {args.key} to '{args.value}'")
