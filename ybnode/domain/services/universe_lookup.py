from ybnode.domain.entities.node_task_params import NodeTaskParams
from ybnode.domain.entities.universe import Universe
from ybnode.domain.exceptions import MissingReferenceError, NotFoundError
from ybnode.domain.ports.catalog_ports import UniverseRepositoryPort


def require_universe(universes: UniverseRepositoryPort, params: NodeTaskParams) -> Universe:
    """Universe referenced by the bundle; absent references are errors."""
    if params.universe_uuid is None:
        raise MissingReferenceError(
            f"Parameters for node {params.node_name} are missing the universe UUID"
        )
    universe = universes.get_universe(params.universe_uuid)
    if universe is None:
        raise NotFoundError(f"Universe {params.universe_uuid} not found")
    return universe
