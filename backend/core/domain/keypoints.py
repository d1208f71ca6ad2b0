"""
Keypoint Catalogs

Fixed, ordered keypoint names used by the positional dialect to give
meaning to anonymous (x, y, z) triples.

Body follows the OpenPose BODY_25 ordering. Hands follow the OpenPose
21-point hand model and are instantiated twice with an "L"/"R" prefix.
Face points have no anatomical names and are labeled by index.
"""

BODY_KEYPOINTS: tuple[str, ...] = (
    "Nose",
    "Neck",
    "RShoulder",
    "RElbow",
    "RWrist",
    "LShoulder",
    "LElbow",
    "LWrist",
    "MidHip",
    "RHip",
    "RKnee",
    "RAnkle",
    "LHip",
    "LKnee",
    "LAnkle",
    "REye",
    "LEye",
    "REar",
    "LEar",
    "LBigToe",
    "LSmallToe",
    "LHeel",
    "RBigToe",
    "RSmallToe",
    "RHeel",
)

HAND_KEYPOINTS: tuple[str, ...] = ("Wrist",) + tuple(
    f"{finger}{joint}"
    for finger in ("Thumb", "Index", "Middle", "Ring", "Pinky")
    for joint in range(1, 5)
)

LEFT_HAND_KEYPOINTS: tuple[str, ...] = tuple(f"L{name}" for name in HAND_KEYPOINTS)
RIGHT_HAND_KEYPOINTS: tuple[str, ...] = tuple(f"R{name}" for name in HAND_KEYPOINTS)

FACE_KEYPOINTS: tuple[str, ...] = tuple(f"Face_{i}" for i in range(70))

# Section name -> catalog, in the order triples are consumed from a frame line
FRAME_SECTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("body", BODY_KEYPOINTS),
    ("left_hand", LEFT_HAND_KEYPOINTS),
    ("right_hand", RIGHT_HAND_KEYPOINTS),
    ("face", FACE_KEYPOINTS),
)

TRIPLES_PER_FRAME = sum(len(catalog) for _, catalog in FRAME_SECTIONS)  # 137
VALUES_PER_FRAME = TRIPLES_PER_FRAME * 3  # 411
