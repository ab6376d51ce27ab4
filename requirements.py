INSTALL = [
    'pyyaml',
]

EXTRAS = {
    'test': [
        'pytest',
    ],
}

if __name__ == '__main__':
    import sys

    reqs = []
    reqs += INSTALL
    if len(sys.argv) > 1:
        for extra in sys.argv[1].split(','):
            reqs += EXTRAS[extra]
    reqs = '\n'.join(reqs)
    print(reqs)
