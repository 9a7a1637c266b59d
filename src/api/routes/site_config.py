from fastapi import APIRouter, status

from src.api.responses import envelope

router = APIRouter(prefix="/config", tags=["Config"])

HOME_PAGE_CONFIG = {
    "heroValues": {
        "vision": "Be Africa's leading Regulator.",
        "mission": (
            "Promoting sustainable value creation from Nigeria's Petroleum "
            "Resources for shared prosperity."
        ),
    },
    "pdfs": {
        "magazine": {
            "file": "/pdfs/Upstream-Gaze-Magazine-Vol.-11.pdf",
            "title": "The Upstream Gaze - Vol. 11",
        },
        "serviceCharter": {
            "file": "/pdfs/2025-NURPC-Integrated-Charter-printed.pdf",
            "title": "NUPRC – Service Charter",
        },
    },
}


@router.get("/home", status_code=status.HTTP_200_OK)
async def get_home_page_config():
    """Static home page content: hero values and featured documents."""
    return envelope(data=HOME_PAGE_CONFIG)
