# Generated by rust-app-stamp. Do not edit.
GIT_REVISION = "dev"
