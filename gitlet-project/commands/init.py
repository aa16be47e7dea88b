# The command: gitlet init
# What it does: Initializes a new repository in the current directory by creating the hidden `.gitlet` directory and its initial commit
# How it does: It creates the `objects`, `refs/heads` and `logs` subdirectories, makes the initial commit (no files, fixed message "initial commit"), points the `master` branch at it and writes `HEAD` as a symbolic reference to `master`
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and a Directed Acyclic Graph (the commit history)

import os
from utils import repository


def run(args):
    repo = repository.init_repository(os.getcwd())
    print(f"Initialized empty Gitlet repository in {os.path.join(repo.root, '.gitlet')}/")
