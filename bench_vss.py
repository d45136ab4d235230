import logging
import secrets
import sys
import time

from params import VSSParams
from vss import is_valid, open_secret, share_secret

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) != 4:
        print(f'usage: {sys.argv[0]} <n> <k> <runs>')
        sys.exit(1)

    n = int(sys.argv[1])
    k = int(sys.argv[2])
    runs = int(sys.argv[3])

    params = VSSParams.secp256k1()
    field = params.field
    indices = [field.random_nonzero() for _ in range(n)]

    with open(f'vss_{k}_{n}.csv', 'w') as outfile:
        print("k,n,run,share_elapsed,verify_elapsed,open_elapsed", file=outfile)
        for i in range(runs):
            secret = field.random()

            start = time.time()
            vshares, c = share_secret(params, indices, secret, k)
            share_elapsed = time.time() - start

            vshare = vshares[secrets.randbelow(n)]
            start = time.time()
            valid = is_valid(params, c, vshare)
            verify_elapsed = time.time() - start

            start = time.time()
            opened = open_secret(vshares[:k])
            open_elapsed = time.time() - start

            if not valid or opened != secret:
                logging.error(f'Run {i + 1}: sharing did not verify or reconstruct (valid = {valid})')
                sys.exit(1)

            print(k, n, i, share_elapsed, verify_elapsed, open_elapsed, sep=',', file=outfile)
            logging.info(f'Finished run {i + 1} of {runs} for config: (k = {k}, n = {n}) in {share_elapsed:.4f} seconds')
