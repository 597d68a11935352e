"""Route Parameter Resolver — turns path identifiers into bound parameters and loaded rows.

Invariants:
    - A malformed identifier (non-numeric, negative, non-finite) raises ValidationError
      before any persistence call
    - A well-formed identifier is bound under "$<name>Id" before its lookup runs
    - A missing row raises NotFoundError; a found row is attached to ctx.loaded
    - Parent identifiers are resolved before child identifiers, so child lookups
      are scoped to an existing parent

Design Decisions:
    - One resolve() for all four resources: the ResourceSpec lookup statement is
      the only thing that differs
"""

from backoffice.core.errors import NotFoundError, ValidationError
from backoffice.core.identifiers import parse_identifier
from backoffice.core.pipeline import PROCEED, RequestContext, Stage
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.services.resources import ResourceSpec


class RouteParameterResolver:
    """Builds the identifier-resolution stages that open every by-id pipeline."""

    def __init__(self, gateway: PersistenceGateway):
        self._gateway = gateway

    def resolve(self, spec: ResourceSpec, raw_id: str) -> Stage:
        gateway = self._gateway

        async def resolve_identifier(ctx: RequestContext):
            identifier = parse_identifier(raw_id)
            if identifier is None:
                raise ValidationError(
                    f"Invalid {spec.label.lower()} id '{raw_id}'", spec.key,
                    details=[{
                        "field": spec.resource.id_param,
                        "message": "must be a finite, non-negative number",
                        "type": "identifier",
                    }],
                )
            ctx.params.set(spec.id_key, identifier)
            row = await gateway.get(spec.lookup, ctx.params.entries())
            if row is None:
                raise NotFoundError(spec.label, identifier)
            ctx.loaded[spec.key] = row
            return PROCEED

        resolve_identifier.__name__ = f"resolve_{spec.resource.id_param}"
        return resolve_identifier
