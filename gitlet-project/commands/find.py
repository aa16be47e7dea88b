# The command: gitlet find "<message>"
# What it does: Prints the ids of all commits whose message is exactly the given text
# How it does: It scans every commit in the graph (not only those reachable from HEAD) and compares messages for exact equality

from utils import repository
from utils.errors import NoCommitWithMessage


def find_commits(repo, message):
    matches = repo.graph.find(message)
    if not matches:
        raise NoCommitWithMessage()
    return matches


def run(args):
    repo = repository.open_repository()
    for commit_id in find_commits(repo, args.message):
        print(commit_id)
