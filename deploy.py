"""
Contract Deployment Wrapper
Runs scripts.deploy_voting_system from the repository root
"""

import os
import subprocess
import sys

if __name__ == "__main__":
    print("=" * 70, file=sys.stderr)
    print("VotingSystem Deployment", file=sys.stderr)
    print("=" * 70, file=sys.stderr)

    # Run deployment script
    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_voting_system"],
        cwd=os.path.dirname(os.path.abspath(__file__))
    )

    sys.exit(result.returncode)
