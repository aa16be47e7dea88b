import argparse
import sys
from commands import (
    init, add, commit, rm, log, find, status, config,
    branch, checkout, merge, reset
)
from utils.errors import GitletError, IncorrectOperands, NoCommandWithThatName

COMMANDS = (
    "init", "add", "commit", "rm", "log", "global-log", "find", "status",
    "checkout", "branch", "rm-branch", "reset", "merge", "config",
)


class GitletArgumentParser(argparse.ArgumentParser):
    # Operand mistakes are reported like any other Gitlet error instead of argparse's usage dump
    def error(self, message):
        raise IncorrectOperands()


def build_parser():
    # The main parser
    parser = GitletArgumentParser(prog="gitlet", description="Gitlet: a tiny local version control system.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new, empty repository.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Stage a file for the next commit.")
    add_parser.add_argument("file", help="File to add.")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged changes.")
    commit_parser.add_argument("message", help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: rm
    rm_parser = subparsers.add_parser("rm", help="Unstage a file or stop tracking it.")
    rm_parser.add_argument("file", help="File to remove.")
    rm_parser.set_defaults(func=rm.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the history of the current branch.")
    log_parser.set_defaults(func=log.run)

    # Command: global-log
    global_log_parser = subparsers.add_parser("global-log", help="Show every commit ever made.")
    global_log_parser.set_defaults(func=log.run_global)

    # Command: find
    find_parser = subparsers.add_parser("find", help="Print the ids of commits with the given message.")
    find_parser.add_argument("message", help="Exact commit message.")
    find_parser.set_defaults(func=find.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: checkout (operands are parsed by commands/checkout.py, see parse_args)
    checkout_parser = subparsers.add_parser("checkout", help="Switch branches or restore a file.")
    checkout_parser.add_argument("operands", nargs="*")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="Create a branch at the current commit.")
    branch_parser.add_argument("name", help="The name of the branch to create.")
    branch_parser.set_defaults(func=branch.run)

    # Command: rm-branch
    rm_branch_parser = subparsers.add_parser("rm-branch", help="Delete a branch pointer.")
    rm_branch_parser.add_argument("name", help="The name of the branch to delete.")
    rm_branch_parser.set_defaults(func=branch.run_delete)

    # Command: reset
    reset_parser = subparsers.add_parser("reset", help="Move the current branch to a commit.")
    reset_parser.add_argument("commit_id", help="Full or abbreviated commit id.")
    reset_parser.set_defaults(func=reset.run)

    # Command: merge
    merge_parser = subparsers.add_parser("merge", help="Merge a branch into the current branch.")
    merge_parser.add_argument("branch", help="The branch to merge.")
    merge_parser.set_defaults(func=merge.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., log.dateformat).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    return parser


def parse_args(argv):
    command = argv[0]
    if command not in COMMANDS and command not in ("-h", "--help"):
        raise NoCommandWithThatName()

    # argparse swallows the '--' separator that two of the checkout forms need
    if command == "checkout":
        return argparse.Namespace(command=command, operands=argv[1:], func=checkout.run)
    return build_parser().parse_args(argv)


# The main entry point for the Gitlet version control system
def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print("Please enter a command.")
        return 0

    try:
        args = parse_args(argv)
        args.func(args)
    except GitletError as e:
        print(e)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
