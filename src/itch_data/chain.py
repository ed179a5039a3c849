"""
Navigation over wharf build chains.

Builds link to their predecessor through `parent_build_id`. Patches
attached to a build only apply on top of its immediate parent, so
upgrading from one build to another means applying every patch on
the path between them, in order.
"""

from collections.abc import Iterable, Iterator

from itch_data.contracts.build import Build
from itch_data.errors import (
    BrokenChainError,
    ChainCycleError,
    DuplicateBuildError,
    NonSequentialPatchError,
    UnknownBuildError,
)
from itch_data.logger import get_logger


class BuildChain:
    """
    Index of build snapshots, keyed by build id.

    Example:
        >>> chain = BuildChain([root, child, grandchild])
        >>> chain.hops_to_root(grandchild.id)
        2
    """

    def __init__(self, builds: Iterable[Build]) -> None:
        self._logger = get_logger(__name__, component="build_chain")
        self._builds: dict[int, Build] = {}
        for build in builds:
            if build.id in self._builds:
                raise DuplicateBuildError(f"Build {build.id} listed twice", build_id=build.id)
            self._builds[build.id] = build

    def __len__(self) -> int:
        return len(self._builds)

    def __contains__(self, build_id: object) -> bool:
        return build_id in self._builds

    def __iter__(self) -> Iterator[Build]:
        return iter(self._builds.values())

    def get(self, build_id: int) -> Build:
        try:
            return self._builds[build_id]
        except KeyError:
            raise UnknownBuildError(f"Build {build_id} not found", build_id=build_id) from None

    def roots(self) -> list[Build]:
        """Builds that start a chain."""
        return [build for build in self._builds.values() if build.is_root]

    def latest(self) -> Build | None:
        """Build with the highest itch.io-generated version number."""
        if not self._builds:
            return None
        return max(self._builds.values(), key=lambda build: build.version)

    def ancestry(self, build_id: int) -> Iterator[Build]:
        """
        Yield a build, then each of its parents up to the chain root.

        Raises:
            UnknownBuildError: if build_id isn't indexed
            BrokenChainError: if a parent is missing from the index
            ChainCycleError: if parent links loop
        """
        build = self.get(build_id)
        seen: set[int] = set()
        while True:
            if build.id in seen:
                raise ChainCycleError(
                    f"Cycle in build chain at build {build.id}", build_id=build.id
                )
            seen.add(build.id)
            yield build

            if build.parent_build_id is None:
                return

            parent = self._builds.get(build.parent_build_id)
            if parent is None:
                self._logger.warning(
                    "Parent build missing from chain",
                    build_id=build.id,
                    parent_build_id=build.parent_build_id,
                )
                raise BrokenChainError(
                    f"Parent {build.parent_build_id} of build {build.id} not found",
                    build_id=build.id,
                )
            build = parent

    def root_of(self, build_id: int) -> Build:
        *_, root = self.ancestry(build_id)
        return root

    def hops_to_root(self, build_id: int) -> int:
        """Number of parent links between a build and its chain root."""
        return sum(1 for _ in self.ancestry(build_id)) - 1

    def patch_path(self, from_build_id: int, to_build_id: int) -> list[Build]:
        """
        Builds whose patches upgrade `from_build_id` to `to_build_id`.

        Returned oldest first; each build's patch applies to the one
        before it (the first applies to `from_build_id`).

        Raises:
            NonSequentialPatchError: if from_build_id isn't an ancestor
                of to_build_id
        """
        self.get(from_build_id)
        path: list[Build] = []
        for build in self.ancestry(to_build_id):
            if build.id == from_build_id:
                path.reverse()
                self._logger.debug(
                    "Resolved patch path",
                    from_build_id=from_build_id,
                    to_build_id=to_build_id,
                    patches=len(path),
                )
                return path
            path.append(build)

        raise NonSequentialPatchError(
            f"Build {from_build_id} is not an ancestor of build {to_build_id}",
            build_id=to_build_id,
        )
