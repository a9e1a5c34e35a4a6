"""Per-session state of the classifier screen.

The screen owns the selected image, the prediction text and the upload
flag. Inference runs on an executor; workers only post finished labels onto
a queue, and the UI thread applies them with ``drain``.
"""

import queue
import uuid
from concurrent.futures import Future
from dataclasses import dataclass
from enum import Enum

import config
from classifier import format_prediction
from logger import logger


class Phase(Enum):
    IDLE = "idle"
    ACQUIRING = "acquiring"
    INFERRING = "inferring"
    LABELED = "labeled"


@dataclass
class ScreenState:
    image: object = None
    prediction: str = config.INITIAL_PREDICTION
    is_image_uploaded: bool = False
    phase: Phase = Phase.IDLE


class PickRequest:
    """One round trip through the photo picker.

    The picker resolves it with an image, or with None when the user cancels.
    A request that was presented but never resolved means the modal was
    dismissed.
    """

    def __init__(self):
        self.id = uuid.uuid4().hex
        self.presented = False
        self._future = Future()

    @property
    def done(self):
        return self._future.done()

    def resolve(self, image):
        if not self._future.done():
            self._future.set_result(image)

    def cancel(self):
        self.resolve(None)

    def result(self):
        if not self._future.done():
            return None
        return self._future.result()


class ClassifierScreen:
    def __init__(self, model_factory, executor):
        self.state = ScreenState()
        self.pending_pick = None
        self.in_flight = 0
        self._model_factory = model_factory
        self._executor = executor
        self._labels = queue.Queue()

    def choose_image(self):
        if self.pending_pick is not None:
            self.pending_pick.cancel()
        self.pending_pick = PickRequest()
        self.state.phase = Phase.ACQUIRING
        return self.pending_pick

    def settle_pick(self):
        request = self.pending_pick
        if request is None or not request.presented:
            return False
        self.pending_pick = None

        image = request.result()
        if image is None:
            self.on_pick_cancelled()
            return False
        self.on_image_picked(image)
        return True

    def on_image_picked(self, image):
        logger.info("Image picked (%sx%s)", *image.size)
        self.state.image = image
        self.state.is_image_uploaded = True
        return self._predict(image)

    def on_pick_cancelled(self):
        logger.info("Pick cancelled")
        self.state.phase = Phase.IDLE

    @property
    def picker_open(self):
        request = self.pending_pick
        return request is not None and request.presented and not request.done

    def start_run(self):
        """Settle a presented pick and apply queued labels before rendering.

        A presented request that is still unanswered at this point means the
        modal was closed without a choice.
        """
        request = self.pending_pick
        if request is not None and request.presented:
            self.settle_pick()
        self.drain()

    def present_pick(self):
        request = self.pending_pick
        if request is None or request.presented:
            return None
        request.presented = True
        return request

    def poll_labels(self):
        """Apply queued labels; True when the whole page should rerun.

        No rerun while the picker is open: the rerun would close it and
        settle the unanswered request as a cancel.
        """
        applied = self.drain()
        return applied and not self.in_flight and not self.picker_open

    def drain(self):
        applied = False
        while True:
            try:
                label = self._labels.get_nowait()
            except queue.Empty:
                return applied
            self.state.prediction = label
            if self.pending_pick is None:
                self.state.phase = Phase.LABELED
            self.in_flight -= 1
            applied = True

    def _predict(self, image):
        try:
            model = self._model_factory()
        except Exception:
            logger.exception("Model load failed")
            self.state.prediction = config.MODEL_LOAD_FAILED
            self.state.phase = Phase.LABELED
            return None

        self.state.phase = Phase.INFERRING
        self.in_flight += 1
        logger.info("Submitting inference (%d in flight)", self.in_flight)
        return self._executor.submit(self._run_inference, model, image)

    def _run_inference(self, model, image):
        # worker thread: only the queue is shared with the UI
        try:
            results = model.classify(image)
        except Exception:
            logger.exception("Inference failed")
            results = []
        label = format_prediction(results)
        logger.info("Inference finished: %s", label)
        self._labels.put(label)
        return label
