from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletXr ships pre-releases; if pip refuses, install it first with:
    # uv pip install FletXr[dev] --pre
    "flet>=1.0.0",
    "FletXr>=0.1.5",

    # --- HTTP & MODELS ---
    "httpx>=0.27.0",
    "pydantic>=2.0.0",

    # --- CONFIG ---
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

extras_require = {
    # --- TESTS ---
    "test": [
        "pytest",
        "pytest-asyncio>=0.23",
    ],
}

setup(
    name="postboard",
    version="0.1.0",
    description="Postboard - posts and login client on Flet",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"postboard": ["shared/config/settings/*.yaml"]},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "postboard=postboard.app.main:run",
        ],
    },
    python_requires=">=3.11",
)
