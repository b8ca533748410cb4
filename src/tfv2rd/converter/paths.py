"""Path resolvers: map filenames reported by Terraform to output paths.

A resolver is chosen once per run from the working directory / base
directory options and then applied to every diagnostic.  All path math is
lexical, the filesystem is never consulted and symlinks are not followed.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from types import ModuleType

from tfv2rd.models.errors import ConfigurationError, PathResolutionError


class PathResolver(ABC):
    """Converts one filename from a diagnostic range into its output form."""

    @abstractmethod
    def resolve(self, filename: str) -> str:
        """Return the output path, or raise ``PathResolutionError``."""

    def __call__(self, filename: str) -> str:
        return self.resolve(filename)


class IdentityPathResolver(PathResolver):
    """Passes filenames through unchanged (no working directory known)."""

    def resolve(self, filename: str) -> str:
        return filename


class AbsolutePathResolver(PathResolver):
    """Makes filenames absolute, interpreting relative ones against ``workdir``."""

    def __init__(self, workdir: str | os.PathLike[str], pathmod: ModuleType = os.path) -> None:
        self._pathmod = pathmod
        self.workdir: str = pathmod.abspath(os.fspath(workdir))

    def absolutize(self, filename: str) -> str:
        # join() discards workdir when filename is already absolute
        return self._pathmod.normpath(self._pathmod.join(self.workdir, filename))

    def resolve(self, filename: str) -> str:
        return _check_encodable(self.absolutize(filename))


class RelativePathResolver(AbsolutePathResolver):
    """Makes filenames absolute against ``workdir``, then relative to ``basedir``."""

    def __init__(
        self,
        workdir: str | os.PathLike[str],
        basedir: str | os.PathLike[str],
        pathmod: ModuleType = os.path,
    ) -> None:
        super().__init__(workdir, pathmod)
        self.basedir: str = pathmod.abspath(os.fspath(basedir))

    def resolve(self, filename: str) -> str:
        absolute = self.absolutize(filename)
        try:
            relative = self._pathmod.relpath(absolute, self.basedir)
        except ValueError as exc:
            raise PathResolutionError(
                filename,
                f"Can't convert '{filename}' into a path relative to '{self.basedir}': {exc}",
            ) from exc
        return _check_encodable(relative)


def make_path_resolver(
    workdir: str | os.PathLike[str] | None = None,
    basedir: str | os.PathLike[str] | None = None,
    pathmod: ModuleType = os.path,
) -> PathResolver:
    """Select the resolver for the given options.

    ``workdir`` is the directory ``terraform validate`` ran in and ``basedir``
    the directory output paths should be relative to.  Both are absolutized
    against the current directory here, once.
    """
    if workdir is None:
        if basedir is not None:
            raise ConfigurationError("A base directory requires a working directory")
        return IdentityPathResolver()
    if basedir is None:
        return AbsolutePathResolver(workdir, pathmod)
    return RelativePathResolver(workdir, basedir, pathmod)


def _check_encodable(path: str) -> str:
    try:
        path.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathResolutionError(path, f"Can't encode path {path!r} as UTF-8") from exc
    return path
