"""Corpus layout and panel editing endpoints."""

from fastapi import APIRouter

from corpus.application import CorpusLayout, EditResult
from corpus.domain import (
    HorizontalPanel,
    OverlapValidator,
    PanelCandidate,
    PanelType,
    Vector3,
    available_types_to_add,
    default_candidate,
)
from corpus.web.dependencies import (
    CorpusEditorDep,
    LayoutCommandDep,
    registry_from_request,
)
from corpus.web.exceptions import PanelEditError
from corpus.web.schemas.common import PanelSchema, Vector3Schema
from corpus.web.schemas.requests import (
    AddPanelRequest,
    CorpusRequest,
    MovePanelRequest,
    RemovePanelRequest,
)
from corpus.web.schemas.responses import (
    AvailableTypesSchema,
    DimensionLineSchema,
    EditResponseSchema,
    EnvelopeSchema,
    ErrorResponseSchema,
    LayoutResponseSchema,
    OverlapPairSchema,
    OverlapResponseSchema,
    PanelDefaultsSchema,
    PanelTypeOptionSchema,
    PlacementSchema,
    SpacingSchema,
)

router = APIRouter(
    prefix="/corpus",
    tags=["corpus"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _vector(v: Vector3) -> Vector3Schema:
    return Vector3Schema(x=v.x, y=v.y, z=v.z)


def _layout_fields(layout: CorpusLayout) -> dict:
    """Response fields shared by layout and edit responses."""
    env = layout.envelope
    return {
        "panels": [
            PanelSchema(
                id=panel.id,
                type=panel.panel_type,
                width=panel.width,
                height=panel.height,
                depth=panel.depth,
                thickness=panel.thickness,
                y_position=(
                    panel.y_position if isinstance(panel, HorizontalPanel) else None
                ),
            )
            for panel in layout.registry
        ],
        "envelope": EnvelopeSchema(
            width=env.width,
            height=env.height,
            depth=env.depth,
            thickness=env.thickness,
            top_offset=env.top_offset,
            bottom_offset=env.bottom_offset,
        ),
        "placements": [
            PlacementSchema(
                panel_id=p.panel_id,
                type=p.panel_type.value,
                size=_vector(p.size),
                position=_vector(p.position),
            )
            for p in layout.placements
        ],
        "spacings": [
            SpacingSchema(y_start=s.y_start, y_end=s.y_end, distance_mm=s.distance_mm)
            for s in layout.spacings
        ],
        "dimension_lines": [
            DimensionLineSchema(
                kind=line.kind.value,
                value_mm=line.value_mm,
                start=_vector(line.start),
                end=_vector(line.end),
                extension_lines=[
                    (_vector(a), _vector(b)) for a, b in line.extension_lines
                ],
                label_position=_vector(line.label_position),
            )
            for line in layout.dimension_lines
        ],
        "closed_frame": layout.closed_frame,
        "has_overlap": layout.has_overlap,
        "warnings": layout.warnings,
    }


def _edit_response(result: EditResult) -> EditResponseSchema:
    if not result.is_valid:
        raise PanelEditError(result.errors)
    return EditResponseSchema(panel_id=result.panel_id, **_layout_fields(result.layout))


@router.post("/layout", response_model=LayoutResponseSchema)
async def compute_layout(
    request: CorpusRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Compute envelope, placements, spacings and dimension lines."""
    registry = registry_from_request(request)
    return LayoutResponseSchema(**_layout_fields(command.execute(registry)))


@router.post("/panels", response_model=EditResponseSchema)
async def add_panel(
    request: AddPanelRequest,
    editor: CorpusEditorDep,
) -> EditResponseSchema:
    """Add a panel. Omitted sizes take the defaults for the panel type.

    Raises:
        PanelEditError: If the panel is rejected (422).
    """
    registry = registry_from_request(request)
    entry = request.panel
    try:
        defaults = default_candidate(entry.type.strip()) if entry.type else None
    except ValueError:
        defaults = None

    def pick(name: str):
        value = getattr(entry, name)
        if value is None and defaults is not None:
            return getattr(defaults, name)
        return value

    candidate = PanelCandidate(
        panel_type=entry.type,
        width=pick("width"),
        height=pick("height"),
        depth=pick("depth"),
        thickness=pick("thickness"),
    )
    return _edit_response(editor.add(registry, candidate))


@router.post("/panels/remove", response_model=EditResponseSchema)
async def remove_panel(
    request: RemovePanelRequest,
    editor: CorpusEditorDep,
) -> EditResponseSchema:
    """Remove a panel by id."""
    registry = registry_from_request(request)
    return _edit_response(editor.remove(registry, request.panel_id))


@router.post("/panels/move", response_model=EditResponseSchema)
async def move_panel(
    request: MovePanelRequest,
    editor: CorpusEditorDep,
) -> EditResponseSchema:
    """Move a shelf. Overlaps are reported in warnings, not rejected."""
    registry = registry_from_request(request)
    return _edit_response(editor.move(registry, request.panel_id, request.y_position))


@router.post("/available-types", response_model=AvailableTypesSchema)
async def available_types(request: CorpusRequest) -> AvailableTypesSchema:
    """List the panel types that can still be added."""
    registry = registry_from_request(request)
    return AvailableTypesSchema(
        types=[
            PanelTypeOptionSchema(type=t.value, label=t.label)
            for t in available_types_to_add(registry)
        ]
    )


@router.get("/defaults/{panel_type}", response_model=PanelDefaultsSchema)
async def panel_defaults(panel_type: PanelType) -> PanelDefaultsSchema:
    """Suggested entry-form values for a panel type."""
    candidate = default_candidate(panel_type)
    return PanelDefaultsSchema(
        type=panel_type.value,
        width=candidate.width,
        height=candidate.height,
        depth=candidate.depth,
        thickness=candidate.thickness,
    )


@router.post("/overlap", response_model=OverlapResponseSchema)
async def check_overlap(request: CorpusRequest) -> OverlapResponseSchema:
    """Check the snapshot for overlapping horizontal panels."""
    registry = registry_from_request(request)
    overlaps = OverlapValidator().find_overlaps(registry.panels)
    return OverlapResponseSchema(
        has_overlap=bool(overlaps),
        overlaps=[
            OverlapPairSchema(
                lower_id=pair.lower.id,
                upper_id=pair.upper.id,
                amount_mm=pair.amount_mm,
                message=pair.message,
            )
            for pair in overlaps
        ],
    )
