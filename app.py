import hashlib
import io
from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np
import streamlit as st
from pyrsistent import thaw

from grid_identicon import Identicon, to_image

HashFn = Callable[[bytes], bytes]

HASH_FN_REGISTRY: Dict[str, HashFn] = {
    "md5": lambda data: hashlib.md5(data).digest(),
    "sha1": lambda data: hashlib.sha1(data).digest(),
    "sha256": lambda data: hashlib.sha256(data).digest(),
}

st.set_page_config(layout="centered", page_title="Grid Identicon")


@dataclass(frozen=True)
class PreviewConfig:
    identity: str
    hash_name: str
    normalize: bool


def get_config_from_widgets() -> PreviewConfig:
    identity: str = st.text_input("Identity", value="stewartlord", key="identity")
    hash_names = list(HASH_FN_REGISTRY.keys())
    hash_name: str = st.selectbox("Hash", hash_names, index=0, key="hash_name")
    normalize: bool = st.checkbox(
        "Trim and lowercase (Gravatar style)", value=True, key="normalize"
    )
    return PreviewConfig(identity=identity, hash_name=hash_name, normalize=normalize)


def digest_for(config: PreviewConfig) -> bytes:
    identity = config.identity.strip().lower() if config.normalize else config.identity
    return HASH_FN_REGISTRY[config.hash_name](identity.encode("utf-8"))


def png_bytes(canvas: np.ndarray) -> bytes:
    buffer = io.BytesIO()
    to_image(canvas).save(buffer, format="PNG")
    return buffer.getvalue()


# --------- Main App ---------
config = get_config_from_widgets()
digest = digest_for(config)
identicon = Identicon(digest)
canvas = identicon.render()

image_col, info_col = st.columns([0.6, 0.4])

with image_col:
    st.image(canvas, use_container_width=True)
    st.download_button(
        "Download PNG",
        data=png_bytes(canvas),
        file_name=f"{digest.hex()}.png",
        mime="image/png",
        use_container_width=True,
    )

with info_col:
    hsl = identicon.foreground_hsl()
    r, g, b = identicon.foreground()
    st.code(digest.hex())
    st.info(f"HSL({hsl.hue:.1f}, {hsl.sat:.1f}%, {hsl.lum:.1f}%)")
    st.info(f"RGB({r}, {g}, {b}) #{r:02x}{g:02x}{b:02x}")
    st.json(
        ["".join("#" if cell else "." for cell in row) for row in thaw(identicon.pattern())],
        expanded=True,
    )
