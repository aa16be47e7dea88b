# What it does: Manages the low-level object database, handling the storage and retrieval of blobs and commit records
# How it does: It implements a content-addressed storage system. `hash_object` saves content and returns its hash. `read_object` retrieves content using its hash. Writing an object that is already present is a no-op, so the same bytes always land in the same place exactly once
# What data structure it uses: Hash Table / Dictionary (the entire object store is a content-addressed dictionary where the SHA-1 hash is the key)

import os
import hashlib
import zlib

from .errors import NotFound

OBJECT_TYPES = ('blob', 'commit')


def compute_hash(content, obj_type): # Returns the SHA-1 of the typed object without touching the disk
    header = f'{obj_type} {len(content)}\0'.encode()
    return hashlib.sha1(header + content).hexdigest()


def get_object_path(repo_root, sha1):
    return os.path.join(repo_root, '.gitlet', 'objects', sha1[:2], sha1[2:])


def object_exists(repo_root, sha1):
    return os.path.isfile(get_object_path(repo_root, sha1))


def hash_object(repo_root, content, obj_type, write=True): #Hashes content and optionally writes it as an object of the given type ('blob', 'commit')
    if obj_type not in OBJECT_TYPES:
        raise ValueError(f"Unknown object type: {obj_type}")

    sha1 = compute_hash(content, obj_type)

    if write and not object_exists(repo_root, sha1):
        object_path = get_object_path(repo_root, sha1)
        os.makedirs(os.path.dirname(object_path), exist_ok=True)

        header = f'{obj_type} {len(content)}\0'.encode()
        tmp_path = object_path + '.tmp'
        with open(tmp_path, 'wb') as f:
            f.write(zlib.compress(header + content))
        os.replace(tmp_path, object_path)

    return sha1


def read_object(repo_root, sha1): #Reads an object by its SHA-1 hash and returns its type and content

    object_path = get_object_path(repo_root, sha1)

    if not os.path.isfile(object_path):
        raise NotFound(f"Object not found: {sha1}")

    with open(object_path, 'rb') as f:
        compressed_data = f.read()

    data = zlib.decompress(compressed_data)

    null_byte_index = data.find(b'\0')
    header = data[:null_byte_index].decode()
    content = data[null_byte_index + 1:]

    obj_type, _ = header.split(' ')

    return obj_type, content


def read_blob(repo_root, sha1): # Reads a blob object and returns its bytes
    obj_type, content = read_object(repo_root, sha1)
    if obj_type != 'blob':
        raise TypeError(f"Object {sha1} is not a blob")
    return content


def write_blob(repo_root, content):
    return hash_object(repo_root, content, 'blob')
