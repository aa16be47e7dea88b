# The command: gitlet reset <commit-id>
# What it does: Moves the current branch to any commit and makes the working directory match it
# How it does: It resolves the (possibly abbreviated) commit id, refuses to run if an untracked working file would be overwritten, then checks out every file the commit tracks, deletes files tracked only by the current HEAD, points the current branch at the commit and clears all pending changes
# What data structure it uses: Hash Table / Dictionary (commit snapshots), Directed Acyclic Graph (the branch pointer may move anywhere in the history graph)

from utils import repository
from commands.checkout import check_out_snapshot, resolve_commit


def reset_to(repo, commit_id):
    target = resolve_commit(repo, commit_id)
    check_out_snapshot(repo, target)
    repo.move_head(target.id)
    return target


def run(args):
    repo = repository.open_repository()
    target = reset_to(repo, args.commit_id)
    repo.save()
    print(f"HEAD is now at {repo.abbrev(target.id)} {target.message.splitlines()[0]}")
