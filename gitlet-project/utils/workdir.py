# What it does: Reads, writes, deletes and lists files in the working directory
# How it does: Every path handed in is relative to the repository root. Writes create missing parent directories; deletes prune directories that become empty. Listing walks the tree with `os.walk`, skipping `.gitlet` and anything matched by `.gitletignore`
# What data structure it uses: Tree Traversal (os.walk over the directory tree), Set (ignore patterns), Dictionary ({path: hash} snapshots of the working directory)

import os
from fnmatch import fnmatch

from . import objects
from .errors import FileNotFound

ALWAYS_IGNORED = ('.gitlet', '__pycache__', '*.pyc')


def ignored_patterns(repo_root): # Glob patterns from .gitletignore plus the ones that are never tracked
    patterns = set(ALWAYS_IGNORED)
    ignore_file = os.path.join(repo_root, '.gitletignore')
    if os.path.isfile(ignore_file):
        with open(ignore_file, 'r') as f:
            patterns.update(
                line.strip() for line in f
                if line.strip() and not line.lstrip().startswith('#')
            )
    return patterns


def is_ignored(path, patterns): # A path is ignored when the whole path or any one of its components matches
    candidates = [path] + path.split(os.sep)
    return any(fnmatch(candidate, pattern) for pattern in patterns for candidate in candidates)


def full_path(repo_root, path):
    return os.path.join(repo_root, path)


def exists(repo_root, path):
    return os.path.isfile(full_path(repo_root, path))


def read_file(repo_root, path):
    file_path = full_path(repo_root, path)
    if not os.path.isfile(file_path):
        raise FileNotFound()
    with open(file_path, 'rb') as f:
        return f.read()


def write_file(repo_root, path, content):
    file_path = full_path(repo_root, path)
    dir_name = os.path.dirname(file_path)
    if dir_name and not os.path.exists(dir_name):
        os.makedirs(dir_name, exist_ok=True)
    with open(file_path, 'wb') as f:
        f.write(content)


def delete_file(repo_root, path): # Deletes a working file if present, returns True when something was removed
    file_path = full_path(repo_root, path)
    if not os.path.isfile(file_path):
        return False
    os.remove(file_path)

    # Prune now-empty parent directories, never the repository root
    parent = os.path.dirname(file_path)
    root = os.path.abspath(repo_root)
    while os.path.abspath(parent) != root and not os.listdir(parent):
        os.rmdir(parent)
        parent = os.path.dirname(parent)
    return True


def list_files(repo_root): # Returns the sorted relative paths of every non-ignored file in the working directory
    patterns = ignored_patterns(repo_root)
    paths = []
    for root, dirs, files in os.walk(repo_root):
        if '.gitlet' in dirs:
            dirs.remove('.gitlet')
        for file in files:
            rel_path = os.path.relpath(os.path.join(root, file), repo_root)
            if not is_ignored(rel_path, patterns):
                paths.append(rel_path)
    return sorted(paths)


def snapshot(repo_root): # Hashes every working file without writing blobs, returns {path: hash}
    working_files = {}
    for rel_path in list_files(repo_root):
        content = read_file(repo_root, rel_path)
        working_files[rel_path] = objects.hash_object(repo_root, content, 'blob', write=False)
    return working_files


def relative_path(repo_root, path): # Normalizes a user-supplied path to be relative to the repository root
    return os.path.relpath(os.path.abspath(path), repo_root)
