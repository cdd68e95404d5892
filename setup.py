"""
Techblog Data Access Package Setup
"""
from setuptools import setup, find_packages

# requirements.txt에서 의존성 읽기
with open("requirements.txt", encoding="utf-8") as f:
    requirements = [
        line.strip()
        for line in f
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="techblog-data",
    version="0.1.0",
    description="블로그 기사/작성자/태그 데이터 접근 레이어",
    author="techblog",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    zip_safe=False,
)
