import os
import setuptools

with open("README.md", "r") as readme_file:
    long_description = readme_file.read()
with open("chanlog/VERSION", "r") as version_file:
    version = version_file.read().strip()

def list_modules(dirname):
    for (module_name, ext) in map(os.path.splitext, os.listdir(dirname)):
        if ext in ('', '.py') and not module_name.startswith('_'):
            yield module_name

package_dir = {
    # Install chanlog's modules as a separate 'chanlog_modules' package
    'chanlog_modules': 'modules',
}

packages = setuptools.find_packages(
    exclude=['modules', 'modules.*', 'tests', 'tests.*'])
packages.append('chanlog_modules')

entry_points = {
    'chanlog.core_modules': [
        f'{module_name} = chanlog.core_modules.{module_name}:Module'
        for module_name in list_modules('chanlog/core_modules')
    ],
    'chanlog.extra_modules': [
        f'{module_name} = chanlog_modules.{module_name}:Module'
        for module_name in list_modules('modules')
    ],
}

setuptools.setup(
    name="chanlog",
    version=version,
    scripts=["chanlogd"],
    description="Per-channel, per-day IRC activity logs for a modular bot",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=packages,
    include_package_data=True,
    package_dir=package_dir,
    package_data={
        '': ['VERSION'],
    },

    entry_points=entry_points,

    extras_require={
        'test': ['pytest>=7'],
    },

    # Modules are loaded from their files (hashflags are read from them), so
    # a zipped install can't work.
    zip_safe=False,

    classifiers=[
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: POSIX",
        "Topic :: Communications :: Chat :: Internet Relay Chat",
    ],
    platforms=["linux"],
    python_requires=">=3.7",
)
