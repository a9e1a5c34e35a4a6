# App settings
APP_TITLE = "Animal Classifier"
PAGE_ICON = "🐾"

# Prediction messages
INITIAL_PREDICTION = "Upload an image to predict"
MODEL_LOAD_FAILED = "Failed to load model"
CLASSIFY_FAILED = "Could not classify image"
PREDICTION_TEMPLATE = "It's a {}!"

# Model settings
IMAGE_SIZE = 224
RESIZE_SIZE = 256
NORMALIZE_MEAN = [0.485, 0.456, 0.406]
NORMALIZE_STD = [0.229, 0.224, 0.225]
TOP_K = 3
INFERENCE_WORKERS = 2
POLL_INTERVAL = 0.5  # seconds between label checks while inference runs

# Picker settings
PICKER_TYPES = ["jpg", "jpeg", "png", "bmp", "webp"]

# Image well
WELL_SIZE = 300
CORNER_RADIUS = 20
BORDER_WIDTH = 3
BORDER_OPACITY = 0.6
PENDING_BLUR_RADIUS = 10
PLACEHOLDER_OPACITY = 0.3
ICON_SIZE = 100
ICON_OPACITY = 0.8
UPLOADED_SCALE = 1.1

LOG_LEVEL = "INFO"
