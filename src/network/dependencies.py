from fastapi import Request
from src.network.graph import NetworkModel

def get_network(request: Request) -> NetworkModel:
    """Network model built by the application lifespan"""
    return request.app.state.network
