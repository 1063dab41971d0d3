from linkcleaner import create_app
import logging
from config import Config

# Configure standard Python logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Launch Factory
app = create_app()

if __name__ == "__main__":
    # Start the Flask development server
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, use_reloader=False)
