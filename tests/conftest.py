# Shared pytest fixtures for Gitlet tests

import pytest
import os
import sys
import shutil
import tempfile

# Add gitlet-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'gitlet-project'))

from utils import repository


class FakeClock:
    # Deterministic clock: every call advances by one second
    def __init__(self, start=1_700_000_000):
        self.now = start

    def __call__(self):
        self.now += 1
        return self.now


def write(repo_root, path, content):
    # Writes a working file, text or bytes
    full_path = os.path.join(repo_root, path)
    os.makedirs(os.path.dirname(full_path) or repo_root, exist_ok=True)
    if isinstance(content, str):
        content = content.encode()
    with open(full_path, 'wb') as f:
        f.write(content)


def read(repo_root, path):
    with open(os.path.join(repo_root, path), 'rb') as f:
        return f.read()


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repo(temp_dir, clock):
    # An initialized repository in a temporary directory, cwd set to its root
    original_dir = os.getcwd()
    os.chdir(temp_dir)
    yield repository.init_repository(temp_dir, clock)
    os.chdir(original_dir)


@pytest.fixture
def repo_with_commit(repo):
    # A repository with README.md committed on master
    from commands import add, commit

    write(repo.root, 'README.md', '# Test Project\n')
    add.add_file(repo, 'README.md')
    first = commit.create_commit(repo, 'Initial import')
    return repo, first


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
