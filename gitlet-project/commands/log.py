# The command: gitlet log / gitlet global-log
# What it does: Displays the commit history from the current HEAD back to the initial commit, or every commit ever made
# How it does: `log` starts with the HEAD commit and follows parent ids until the initial commit, which has none. `global-log` lists the whole commit arena in creation order, including commits no branch reaches anymore
# What data structure it uses: It performs a Graph Traversal (a linear walk up the parent chain) on the Directed Acyclic Graph (DAG) formed by the commits

import time
from utils import repository, config as config_utils


def log_entries(repo): # HEAD first, initial commit last
    return repo.graph.history(repo.head_id)


def global_log_entries(repo):
    return repo.graph.commits()


def format_entry(commit, date_format):
    date = time.strftime(date_format, time.localtime(commit.timestamp))
    return f"===\ncommit {commit.id}\nDate: {date}\n{commit.message}\n"


def _print_entries(repo, commits):
    date_format = config_utils.get_date_format(repo.config)
    for commit in commits:
        print(format_entry(commit, date_format))


def run(args):
    repo = repository.open_repository()
    _print_entries(repo, log_entries(repo))


def run_global(args):
    repo = repository.open_repository()
    _print_entries(repo, global_log_entries(repo))
