from fastapi import APIRouter, Depends, HTTPException, status, Query
import structlog

from src.config import settings
from src.network.dependencies import get_network
from src.network.graph import NetworkModel
from src.routes.exceptions import InvalidRouteRequestError, NoRouteFoundError
from src.routes.fare_service import FareCalculator
from src.routes.schemas import (
    DirectionsRequest, FareQuoteResponse, FareTableResponse, JourneyPlan
)
from src.routes.service import RouteService

router = APIRouter()
logger = structlog.get_logger(__name__)

def get_route_service(network: NetworkModel = Depends(get_network)) -> RouteService:
    return RouteService(network)

@router.post("/directions", response_model=JourneyPlan)
def get_directions(
    request: DirectionsRequest,
    route_service: RouteService = Depends(get_route_service)
):
    """Fastest route between two stations with instructions, distance and fare"""
    try:
        return route_service.plan_journey(request.origin, request.destination)
    except InvalidRouteRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": e.message,
                "errors": [
                    {
                        "code": error.error_code,
                        "message": error.error_message,
                        "field": error.field
                    }
                    for error in e.errors
                ]
            }
        )
    except NoRouteFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except Exception:
        logger.exception(
            "route_calculation_failed",
            origin=request.origin,
            destination=request.destination
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate route."
        )

@router.get("/fares", response_model=FareTableResponse)
def get_fare_table():
    """Station-count fare slabs for a single journey token"""
    return FareTableResponse(
        currency=settings.FARE_CURRENCY,
        slabs=FareCalculator().fare_table()
    )

@router.get("/fare", response_model=FareQuoteResponse)
def get_fare(
    hops: int = Query(..., ge=0, description="Number of stations travelled")
):
    """Fare for a given number of stations travelled"""
    return FareQuoteResponse(
        hops=hops,
        fare=FareCalculator().fare_for_hops(hops),
        currency=settings.FARE_CURRENCY
    )
