"""Read-only view over a generator environment's registry."""

from __future__ import annotations

from polymer_init.init.models import GeneratorDescriptor, GeneratorEnv


def list_generators(env: GeneratorEnv) -> dict[str, GeneratorDescriptor]:
    """Return a fresh snapshot of ``{identifier: descriptor}``.

    The environment is queried on every call. Two snapshots taken by the
    same run (one to build the choice list, one to validate the answer) are
    independent reads; a generator may disappear in between, which the
    executor reports as not found.
    """
    return dict(env.get_generators_meta())
