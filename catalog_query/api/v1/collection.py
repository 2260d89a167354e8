"""
Collection endpoints.

The process holds a single CollectionController (see
`wiring.dependencies.get_collection_controller`), so every client shares one
query state: actions from one caller change the page every other caller sees.
The host is meant for a single user, such as a local UI or a kiosk.
"""

from fastapi import APIRouter, Depends

from catalog_query.api.v1.schemas import (
    ActionRequestSchema,
    CollectionResponseSchema,
    ProductSchema,
    QueryStateSchema,
)
from catalog_query.application.use_cases.collection_controller import CollectionController
from catalog_query.wiring.dependencies import get_collection_controller

router = APIRouter()


@router.get("/collection", response_model=CollectionResponseSchema)
async def get_collection(
    wait: bool = True,
    controller: CollectionController = Depends(get_collection_controller),
):
    controller.load()
    if wait:
        await controller.wait_idle()
    return _to_response(controller)


@router.post("/collection/actions", response_model=CollectionResponseSchema)
async def post_action(
    req: ActionRequestSchema,
    wait: bool = True,
    controller: CollectionController = Depends(get_collection_controller),
):
    controller.dispatch(req.action.to_action())
    if wait:
        await controller.wait_idle()
    return _to_response(controller)


def _to_response(controller: CollectionController) -> CollectionResponseSchema:
    state = controller.state
    view = controller.view()
    return CollectionResponseSchema(
        query=QueryStateSchema(
            categories=sorted(state.categories),
            sub_categories=sorted(state.sub_categories),
            sort=state.sort_mode,
            search=state.search_text,
            page=state.page,
            page_size=state.page_size,
        ),
        items=[
            ProductSchema(id=p.id, name=p.name, slug=p.slug, price=p.price, image=p.image)
            for p in view.items
        ],
        page=view.page,
        total_pages=view.total_pages,
        page_label=view.page_label,
        can_go_previous=view.can_go_previous,
        can_go_next=view.can_go_next,
        is_loading=view.is_loading,
        show_loading_indicator=view.show_loading_indicator,
        failed=view.failed,
        error=view.error,
    )
