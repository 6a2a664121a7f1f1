from PyQt5.Qt import QVBoxLayout, QHBoxLayout, QLayout

from .image_widgets import AttractorImage, toPixmap, mouseButtonsState


def vStack(*args, cm=(0, 0, 0, 0)):
    l = QVBoxLayout()
    l.setContentsMargins(*cm)
    l.setSpacing(0)
    for a in args:
        if isinstance(a, QLayout):
            l.addLayout(a)
        else:
            l.addWidget(a)
    return l


def hStack(*args, cm=(0, 0, 0, 0)):
    l = QHBoxLayout()
    l.setContentsMargins(*cm)
    l.setSpacing(0)
    for a in args:
        if isinstance(a, QLayout):
            l.addLayout(a)
        else:
            l.addWidget(a)
    return l
