# The command: gitlet add <file>
# What it does: Takes a snapshot of a file from the working directory and stages it for the next commit
# How it does: It hashes the working copy. New content is written to the object store as a blob and recorded in the staging area; content identical to the HEAD commit's version is only marked clean. Re-adding a file also cancels an earlier `gitlet rm` of it
# What data structure it uses: Hash Table / Dictionary (the staging area), Set (removed and untracked paths)

from utils import repository, workdir


def add_file(repo, path): # Stages one path, returns 'staged', 'clean' or 'unchanged'
    result = repo.staging.stage(path, repo.tracked_hash(path))
    repo.removed.discard(path)
    repo.untracked.discard(path)
    return result


def run(args):
    repo = repository.open_repository()
    path = workdir.relative_path(repo.root, args.file)
    add_file(repo, path)
    repo.save()
