VERBOSE = False


def log(*args, ctx="--"):
    print(f"({ctx})", *args, flush=True)


def debug(*args, ctx="DD"):
    if VERBOSE:
        log(*args, ctx=ctx)


def info(*args, ctx="--"):
    log(*args, ctx=ctx)


def warn(*args, ctx="WW"):
    log(*args, ctx=ctx)


def error(*args, ctx="EE"):
    log(*args, ctx=ctx)
