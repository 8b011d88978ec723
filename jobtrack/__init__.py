import logging
import sys

# Configure logging early in the import process
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),  # Ensure logs go to stdout
        logging.FileHandler('jobtrack.log', mode='a')  # Also log to file
    ]
)

# Set specific loggers to INFO level
logging.getLogger('jobtrack').setLevel(logging.INFO)
logging.getLogger('jobtrack.api').setLevel(logging.INFO)
logging.getLogger('jobtrack.db').setLevel(logging.INFO)
logging.getLogger('jobtrack.services').setLevel(logging.INFO)

# Reduce noise from other libraries
logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('requests').setLevel(logging.WARNING)
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('supabase').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)
logger.info("Logging configuration initialized")
