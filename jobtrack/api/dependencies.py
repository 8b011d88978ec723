from fastapi import HTTPException, Request
import logging

logger = logging.getLogger(__name__)

def get_user_id(request: Request) -> str:
    """Extract user_id from the Supabase session token"""
    from ..db.supabase import supabase_manager
    from ..utils.error import SessionError

    # Get token from Authorization header
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise HTTPException(status_code=401, detail="No authorization header")

    try:
        scheme, token = auth_header.split()
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    if scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid authentication scheme")

    try:
        user_id = supabase_manager.get_user_id_from_token(token)
    except SessionError as e:
        logger.warning(f"Session lookup failed: {e}")
        raise HTTPException(status_code=401, detail="Unauthorized")
    except Exception as e:
        logger.error(f"Token verification failed: {e}")
        raise HTTPException(status_code=500, detail="Token verification failed")

    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id

# Re-export for convenience
__all__ = ['get_user_id']
