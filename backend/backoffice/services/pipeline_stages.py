"""Pipeline Stages — the shared stage vocabulary (validate, insert, update, fetch, respond).

Invariants:
    - validate raises ValidationError before anything touches the store
    - insert binds the generated id under the entity's id key for the same request
    - refetch after a write that finds no row raises PersistenceError, never 404
    - respond_* stages are terminal; every other stage returns PROCEED

Design Decisions:
    - Factories return closures named after what they do, so pipeline logs
      identify the halting stage
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from backoffice.core.errors import (
    PersistenceError, ValidationError, field_details,
)
from backoffice.core.pipeline import PROCEED, RequestContext, Respond, Stage
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.services.resources import ResourceSpec

logger = logging.getLogger(__name__)


# ─── Validation ──────────────────────────────────────────────────

def validate_body(spec: ResourceSpec) -> Stage:
    """Parse the envelope field into the typed input model and seed parameters."""

    async def validate(ctx: RequestContext):
        raw = (ctx.body or {}).get(spec.key)
        if raw is None:
            raise ValidationError(
                f"Request body must contain '{spec.key}'", spec.key,
                details=[{
                    "field": spec.key, "message": "Field required",
                    "type": "missing",
                }],
            )
        try:
            payload = spec.input_model.model_validate(raw)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid {spec.label.lower()}", spec.key,
                details=field_details(e.errors(include_url=False)),
            )
        ctx.params.seed(payload.model_dump(by_alias=True), prefixed=True)
        return PROCEED

    return validate


# ─── Mutation ────────────────────────────────────────────────────

def insert_row(gateway: PersistenceGateway, spec: ResourceSpec) -> Stage:

    async def insert(ctx: RequestContext):
        result = await gateway.run(spec.insert, ctx.params.entries())
        if result.last_id is None:
            raise PersistenceError(
                f"{spec.label} insert returned no identifier", "insert",
            )
        ctx.params.set(spec.id_key, result.last_id)
        logger.info(
            f"{spec.label} {result.last_id} created",
            extra={"resource": spec.key},
        )
        return PROCEED

    return insert


def update_row(gateway: PersistenceGateway, spec: ResourceSpec) -> Stage:

    async def update(ctx: RequestContext):
        await gateway.run(spec.update, ctx.params.entries())
        return PROCEED

    return update


def run_statement(
    gateway: PersistenceGateway, spec: ResourceSpec, statement: str,
) -> Stage:
    """Execute a keyed write (delete, soft delete) against the resolved row."""

    async def delete(ctx: RequestContext):
        await gateway.run(statement, ctx.params.entries())
        logger.info(
            f"{spec.label} {ctx.params.get(spec.id_key)} deleted",
            extra={"resource": spec.key},
        )
        return PROCEED

    return delete


# ─── Queries ─────────────────────────────────────────────────────

def refetch(gateway: PersistenceGateway, spec: ResourceSpec) -> Stage:
    """Read back the row just written; it must exist."""

    async def fetch_written(ctx: RequestContext):
        row = await gateway.get(spec.lookup, ctx.params.entries())
        if row is None:
            raise PersistenceError(
                f"{spec.label} {ctx.params.get(spec.id_key)} missing after write",
                "refetch",
            )
        ctx.loaded[spec.key] = row
        return PROCEED

    return fetch_written


def fetch_many(gateway: PersistenceGateway, spec: ResourceSpec) -> Stage:

    async def fetch_all(ctx: RequestContext):
        ctx.loaded[spec.collection] = await gateway.all(
            spec.listing, ctx.params.entries(),
        )
        return PROCEED

    return fetch_all


# ─── Responses ───────────────────────────────────────────────────

def respond_one(spec: ResourceSpec, status_code: int = 200) -> Stage:

    async def emit(ctx: RequestContext):
        row = spec.read_model.model_validate(ctx.loaded[spec.key])
        return Respond(status_code, {spec.key: row.model_dump(by_alias=True)})

    return emit


def respond_many(spec: ResourceSpec) -> Stage:

    async def emit_all(ctx: RequestContext):
        rows = [
            spec.read_model.model_validate(row).model_dump(by_alias=True)
            for row in ctx.loaded[spec.collection]
        ]
        return Respond(200, {spec.collection: rows})

    return emit_all


def respond_empty(status_code: int = 204) -> Stage:

    async def emit_empty(ctx: RequestContext):
        return Respond(status_code)

    return emit_empty
