import string

import torch
import torchvision.models as models
import torchvision.transforms as transforms
from torchvision.models import ResNet50_Weights

import config
from logger import logger


class AnimalClassifier:
    def __init__(self, model=None, categories=None, device=None):
        if device is None:
            device = 'cuda' if torch.cuda.is_available() else 'cpu'
        self.device = torch.device(device)

        if model is None:
            weights = ResNet50_Weights.DEFAULT
            model = models.resnet50(weights=weights)
            categories = weights.meta["categories"]
        if categories is None:
            raise ValueError("categories are required when a model is supplied")

        self.model = model
        self.model.eval()
        self.model.to(self.device)
        self.categories = list(categories)

        self.transform = transforms.Compose([
            transforms.Resize(config.RESIZE_SIZE),
            transforms.CenterCrop(config.IMAGE_SIZE),
            transforms.ToTensor(),
            transforms.Normalize(
                mean=config.NORMALIZE_MEAN,
                std=config.NORMALIZE_STD
            )
        ])

    def classify(self, image):
        """Return up to TOP_K (label, confidence) pairs, best first."""
        img_tensor = self.transform(image.convert("RGB"))
        img_tensor = img_tensor.unsqueeze(0).to(self.device)

        with torch.no_grad():
            output = self.model(img_tensor)
            probabilities = torch.nn.functional.softmax(output[0], dim=0)

        k = min(config.TOP_K, probabilities.shape[0])
        top_prob, top_catid = torch.topk(probabilities, k)
        return [(self.categories[int(idx)], prob.item()) for prob, idx in zip(top_prob, top_catid)]


def load_classifier():
    logger.info("Loading ResNet-50 classifier")
    classifier = AnimalClassifier()
    logger.info("Classifier ready on %s (%d categories)", classifier.device, len(classifier.categories))
    return classifier


def format_prediction(results):
    if not results:
        return config.CLASSIFY_FAILED
    name, _ = results[0]
    return config.PREDICTION_TEMPLATE.format(string.capwords(name))
