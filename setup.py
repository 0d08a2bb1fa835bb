from setuptools import setup

version = {}
with open('distviz/version.py', 'r') as f:
    exec(f.read(), version)

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name='distviz',
    version=version['__version__'],
    description='Discrete Probability Distribution Visualizer',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.19',
        'matplotlib>=3.3',
        'scipy>=1.5',
        'markdown>=3.3',
        'pyyaml>=5.4',
        ],
    extras_require={'gui': 'pyqt6',
                    'test': 'pytest'},
    packages=['distviz', 'distviz.common', 'distviz.common.style',
              'distviz.visualizer', 'distviz.visualizer.report',
              'distviz.project', 'distviz.gui', 'distviz.gui.help_strings'],
    entry_points={
        'console_scripts': ['distviz = distviz.__main__:main_visualize',
                            'distvizf = distviz.__main__:main_setup',
                            ],
        'gui_scripts': ['distvizui = distviz.gui.__main__:main'],
        },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        ]
    )
