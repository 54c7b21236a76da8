from fastapi import APIRouter

from designtools.api.schemas import BuildClassRequest, ClassResponse, ComputedClassRequest, ParseClassesRequest
from designtools.core.computed_classes import computed_to_class
from designtools.core.utility_classes import build_class, parse_classes
from designtools.models import ParsedClasses

router = APIRouter(prefix="/classes", tags=["classes"])


@router.post("/parse", response_model=ParsedClasses)
async def parse(body: ParseClassesRequest) -> ParsedClasses:
    return parse_classes(body.classes)


@router.post("/build", response_model=ClassResponse)
async def build(body: BuildClassRequest) -> ClassResponse:
    return ClassResponse(class_name=build_class(body.property, body.value, body.prefix))


@router.post("/from-computed", response_model=ClassResponse)
async def from_computed(body: ComputedClassRequest) -> ClassResponse:
    """Map a rendered CSS value to a utility class, falling back to an arbitrary value."""
    suggestion = computed_to_class(body.css_property, body.value, body.prefix)
    return ClassResponse(class_name=suggestion.class_name, exact=suggestion.exact)
