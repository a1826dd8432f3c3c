"""
FastAPI dependencies.
"""
from fastapi import Request

def get_services(request: Request):
    """
    Services dependency - Returns the application's ClinicServices.
    
    Args:
        request: Current request
        
    Returns:
        ClinicServices: Services attached to the application at startup
    """
    return request.app.state.services
