# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Builds the final recreation prompt from a model description and user options."""

from dataclasses import dataclass, field, replace
from typing import Optional

ORIGINAL_ASPECT_RATIO = "Original"
ASPECT_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4"]

SINGLE_SUBJECT_CLAUSE = (
    "(Do not change facial details from the description; use the provided reference "
    "photo to accurately transfer the subject's face and hair, maintaining realistic "
    "skin texture and a photorealistic quality)."
)
SEPARATE_REFERENCES_INSTRUCTION = "use a separate face reference for each corresponding person"
SHARED_REFERENCES_INSTRUCTION = "use the provided reference photos for each person"
MULTI_SUBJECT_TEMPLATE = (
    "The final image must perfectly replicate the described scene, including the exact "
    "poses, body language, interactions, and relative positions of all subjects. "
    "(Do not change facial details; {instruction}, ensuring their facial features and "
    "hair are accurately transferred while maintaining a photorealistic and cohesive look)."
)

RESOLUTION_PRESETS = {
    "HD": "HD, 1080p, high quality",
    "4K": "4K resolution, photorealistic, ultra-detailed",
    "8K": "8K resolution, masterpiece, photorealistic, ultra-detailed",
}
RESOLUTION_OPTIONS = ["Default", *RESOLUTION_PRESETS]


@dataclass(frozen=True)
class PromptContext:
    """Everything the final prompt is derived from."""

    description: str = ""
    subject_count: int = 0
    aspect_ratio: str = ORIGINAL_ASPECT_RATIO
    original_aspect_ratio: Optional[str] = None
    use_face_reference: bool = True
    use_separate_references: bool = True


def _gcd(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return a


def reduce_aspect_ratio(width: int, height: int) -> str:
    """Reduces pixel dimensions to a canonical "W:H" ratio.

    Raises:
        ValueError: If either dimension is not a positive integer.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Cannot compute an aspect ratio for {width}x{height}.")
    divisor = _gcd(width, height)
    return f"{width // divisor}:{height // divisor}"


def resolve_aspect_ratio(aspect_ratio: str, original_aspect_ratio: Optional[str]) -> Optional[str]:
    """Maps the "Original" choice to the uploaded image's own ratio."""
    if aspect_ratio == ORIGINAL_ASPECT_RATIO:
        return original_aspect_ratio
    return aspect_ratio


def face_reference_clause(subject_count: int, use_separate_references: bool) -> str:
    if subject_count > 1:
        instruction = (
            SEPARATE_REFERENCES_INSTRUCTION
            if use_separate_references
            else SHARED_REFERENCES_INSTRUCTION
        )
        return MULTI_SUBJECT_TEMPLATE.format(instruction=instruction)
    return SINGLE_SUBJECT_CLAUSE


def assemble_prompt(context: PromptContext) -> str:
    """Returns the final prompt for a context. Pure and deterministic."""
    prompt = context.description
    if context.use_face_reference:
        clause = face_reference_clause(
            context.subject_count, context.use_separate_references
        )
        prompt = f"{prompt} {clause}"

    resolved = resolve_aspect_ratio(context.aspect_ratio, context.original_aspect_ratio)
    if resolved and resolved != ORIGINAL_ASPECT_RATIO:
        prompt = f"{prompt} --ar {resolved}"
    return prompt.strip()


def apply_resolution_preset(prompt: str, resolution: str) -> str:
    """Appends the quality keywords for a Nano Banana resolution choice."""
    prompt = prompt.strip()
    preset = RESOLUTION_PRESETS.get(resolution)
    if not preset:
        return prompt
    return f"{prompt}, {preset}"


@dataclass
class PromptDraft:
    """
    The prompt shown in the editor.

    The text is recomputed from the context on every change until the user
    edits it by hand; from then on it is an override that is kept until a new
    description arrives.
    """

    context: PromptContext = field(default_factory=PromptContext)  # pylint: disable=invalid-field-call
    text: str = ""
    overridden: bool = False

    def load_description(self, description: str, subject_count: int) -> str:
        """Starts a new draft from a fresh model description."""
        self.context = replace(
            self.context, description=description, subject_count=subject_count
        )
        self.overridden = False
        return self._recompute()

    def update(self, **changes) -> str:
        """Changes prompt options, e.g. update(aspect_ratio="16:9")."""
        self.context = replace(self.context, **changes)
        if not self.overridden:
            self._recompute()
        return self.text

    def edit(self, text: str) -> None:
        """Records a manual edit from the editor."""
        if text == self.text:
            return
        self.text = text
        self.overridden = True

    def reset(self) -> None:
        self.context = PromptContext()
        self.text = ""
        self.overridden = False

    def _recompute(self) -> str:
        # No description yet means nothing to show.
        self.text = assemble_prompt(self.context) if self.context.description else ""
        return self.text
