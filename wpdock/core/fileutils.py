"""wpdock file utils"""
import os
import shutil

from wpdock.core.logging import Log


class WPFileUtils:
    """Utilities to operate on files"""
    def __init__():
        pass

    def mkdir(self, path):
        """
            create directories, parents included
            path : path for directory to be created
        """
        try:
            Log.debug(self, f"Creating directory {path}")
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            Log.debug(self, f"{e.strerror}")
            raise

    def copyfiles(self, src, dest, overwrite=False):
        """
            Copy a directory tree.
            With overwrite, the contents of dest are removed first so it
            mirrors src exactly. dest itself is never removed, it can be
            a bind mount of a running container.
        """
        Log.debug(self, f"Copying files, Source:{src}, Dest:{dest}")
        if overwrite:
            if os.path.isdir(dest) and not os.path.islink(dest):
                WPFileUtils.clear(self, dest)
            else:
                WPFileUtils.rm(self, dest)
        try:
            shutil.copytree(src, dest, symlinks=True, dirs_exist_ok=True)
        except shutil.Error as e:
            Log.debug(self, f"{e}")
            raise
        except OSError as e:
            Log.debug(self, f"{e.strerror}")
            raise

    def rm(self, path):
        """
            Remove files or directories
        """
        if not os.path.lexists(path):
            return
        Log.debug(self, f"Removing {path}")
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)

    def clear(self, path):
        """
            Remove every entry inside a directory, keeping the directory
        """
        Log.debug(self, f"Clearing contents of {path}")
        for entry in os.listdir(path):
            WPFileUtils.rm(self, os.path.join(path, entry))

    def chmod(self, path, perm, recursive=False):
        """
            Changes Permission for files
            path : file path permission to be changed
            perm : permissions to be given
            recursive: change permission recursively for all files
        """
        Log.debug(self, f"Changing permission of {path}, Perm:{perm:o}")
        os.chmod(path, perm)
        if recursive:
            for root, dirs, files in os.walk(path):
                for name in dirs + files:
                    target = os.path.join(root, name)
                    if not os.path.islink(target):
                        os.chmod(target, perm)

    @staticmethod
    def dirsize(path):
        """Total size in bytes of every file under path."""
        total = 0
        for root, _, files in os.walk(path):
            for name in files:
                target = os.path.join(root, name)
                if not os.path.islink(target):
                    total += os.path.getsize(target)
        return total

    @staticmethod
    def human_size(size):
        """du -h style size, e.g. 4.0K, 12M"""
        for unit in ('B', 'K', 'M', 'G', 'T'):
            if size < 1024 or unit == 'T':
                if unit == 'B':
                    return f"{int(size)}{unit}"
                return f"{size:.1f}{unit}"
            size /= 1024.0

    def unique_path(self, path):
        """
            Return path, or path_1, path_2, ... for the first one
            that does not exist yet.
        """
        if not os.path.lexists(path):
            return path
        index = 1
        while os.path.lexists(f"{path}_{index}"):
            index += 1
        Log.debug(self, f"{path} already exists, using {path}_{index}")
        return f"{path}_{index}"
